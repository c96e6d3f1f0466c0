"""Enumerated column types shared by the job board tables.

Each Python enum is stored by value, under the Postgres enum type name that
the existing database already uses.
"""

import enum

from sqlalchemy import Enum


class WageInterval(str, enum.Enum):
    HOURLY = "hourly"
    YEARLY = "yearly"


class LocationRequirement(str, enum.Enum):
    IN_OFFICE = "in_office"
    HYBRID = "hybrid"
    REMOTE = "remote"


class JobListingStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    DELISTED = "delisted"


class ExperienceLevel(str, enum.Enum):
    JUNIOR = "junior"
    MID_LEVEL = "mid_level"
    SENIOR = "senior"


class JobListingType(str, enum.Enum):
    INTERNSHIP = "internship"
    PART_TIME = "part_time"
    FULL_TIME = "full_time"


class ApplicationStage(str, enum.Enum):
    DENIED = "denied"
    APPLIED = "applied"
    INTERESTED = "interested"
    INTERVIEWED = "interviewed"
    HIRED = "hired"


def _values(enum_cls):
    return [member.value for member in enum_cls]


def pg_enum(enum_cls, name: str) -> Enum:
    """SQLAlchemy Enum persisting member values under a named Postgres type."""
    return Enum(enum_cls, name=name, values_callable=_values, validate_strings=True)


wage_interval_enum = pg_enum(WageInterval, "wage_interval_enum")
location_requirement_enum = pg_enum(LocationRequirement, "location_requirement_enum")
status_enum = pg_enum(JobListingStatus, "status_enum")
experience_level_enum = pg_enum(ExperienceLevel, "experience_level_enum")
type_enum = pg_enum(JobListingType, "type_enum")
stage_enum = pg_enum(ApplicationStage, "stage_enum")
