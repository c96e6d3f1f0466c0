"""Database models package.

Importing this package registers every table on ``Base.metadata``.
"""

from jobboard.models.base import Base
from jobboard.models.enums import (
    ApplicationStage,
    ExperienceLevel,
    JobListingStatus,
    JobListingType,
    LocationRequirement,
    WageInterval,
)
from jobboard.models.user import User
from jobboard.models.organization import Organization
from jobboard.models.job_listing import JobListing
from jobboard.models.job_listing_application import JobListingApplication
from jobboard.models.organization_setting import OrganizationSetting
from jobboard.models.user_notification_setting import UserNotificationSetting
from jobboard.models.user_resume import UserResume

__all__ = [
    "Base",
    "ApplicationStage",
    "ExperienceLevel",
    "JobListingStatus",
    "JobListingType",
    "LocationRequirement",
    "WageInterval",
    "User",
    "Organization",
    "JobListing",
    "JobListingApplication",
    "OrganizationSetting",
    "UserNotificationSetting",
    "UserResume",
]
