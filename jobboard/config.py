"""Application configuration from environment variables."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Job Board"
    debug: bool = False

    # Database (no default: DATABASE_URL must be set)
    database_url: str
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 30

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def escape_ini_value(value: str) -> str:
    """Escape ``%`` so ConfigParser interpolation leaves URL-encoded passwords intact."""
    return value.replace("%", "%%")
