"""Job board data layer: schema models, database client and settings."""
