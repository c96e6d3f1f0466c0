"""Pydantic schemas package."""

from jobboard.schemas.organization import (
    OrganizationBase,
    OrganizationCreate,
    OrganizationRead,
    OrganizationSummary,
    OrganizationSettingBase,
    OrganizationSettingCreate,
    OrganizationSettingRead,
)
from jobboard.schemas.user import (
    UserBase,
    UserCreate,
    UserRead,
    UserNotificationSettingBase,
    UserNotificationSettingCreate,
    UserNotificationSettingRead,
    UserResumeBase,
    UserResumeCreate,
    UserResumeRead,
)
from jobboard.schemas.job_listing import (
    JobListingBase,
    JobListingCreate,
    JobListingRead,
    JobListingWithOrganization,
    JobListingApplicationBase,
    JobListingApplicationCreate,
    JobListingApplicationRead,
)

__all__ = [
    # Organization
    "OrganizationBase",
    "OrganizationCreate",
    "OrganizationRead",
    "OrganizationSummary",
    "OrganizationSettingBase",
    "OrganizationSettingCreate",
    "OrganizationSettingRead",
    # User
    "UserBase",
    "UserCreate",
    "UserRead",
    "UserNotificationSettingBase",
    "UserNotificationSettingCreate",
    "UserNotificationSettingRead",
    "UserResumeBase",
    "UserResumeCreate",
    "UserResumeRead",
    # JobListing
    "JobListingBase",
    "JobListingCreate",
    "JobListingRead",
    "JobListingWithOrganization",
    "JobListingApplicationBase",
    "JobListingApplicationCreate",
    "JobListingApplicationRead",
]
