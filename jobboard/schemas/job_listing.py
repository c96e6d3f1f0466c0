"""Pydantic schemas for JobListing and JobListingApplication models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobboard.models.enums import (
    ApplicationStage,
    ExperienceLevel,
    JobListingStatus,
    JobListingType,
    LocationRequirement,
    WageInterval,
)
from jobboard.schemas.organization import OrganizationSummary


class JobListingBase(BaseModel):
    """Base fields for job listing."""

    title: str
    description: str | None = None
    wage: int | None = None
    wage_interval: WageInterval | None = None
    state_abbreviation: str | None = None
    city: str | None = None
    is_featured: bool = False
    location_requirement: LocationRequirement
    status: JobListingStatus = JobListingStatus.DRAFT
    experience_level: ExperienceLevel
    type: JobListingType
    posted_at: datetime | None = None


class JobListingCreate(JobListingBase):
    """Fields for creating a job listing."""

    organization_id: UUID
    state_abbreviation: str | None = Field(default=None, max_length=2)


class JobListingRead(JobListingBase):
    """Full job listing output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    created_at: datetime
    updated_at: datetime


class JobListingWithOrganization(JobListingRead):
    """Job listing with its organization embedded."""

    organization: OrganizationSummary


class JobListingApplicationBase(BaseModel):
    cover_letter: str | None = None
    stage: ApplicationStage = ApplicationStage.APPLIED
    rating: int | None = None


class JobListingApplicationCreate(JobListingApplicationBase):
    user_id: UUID
    job_listing_id: UUID


class JobListingApplicationRead(JobListingApplicationBase):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    job_listing_id: UUID
    created_at: datetime
    updated_at: datetime
