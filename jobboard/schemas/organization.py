"""Pydantic schemas for Organization and OrganizationSetting models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class OrganizationBase(BaseModel):
    """Base fields for organization."""

    name: str
    image_url: str


class OrganizationCreate(OrganizationBase):
    """Fields for creating an organization."""


class OrganizationRead(OrganizationBase):
    """Full organization output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class OrganizationSummary(BaseModel):
    """Minimal organization info for nested responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    image_url: str


class OrganizationSettingBase(BaseModel):
    """Per-member notification preferences for an organization."""

    new_application_email_notifications: bool = False
    minimum_rating: int | None = None


class OrganizationSettingCreate(OrganizationSettingBase):
    user_id: UUID
    organization_id: UUID


class OrganizationSettingRead(OrganizationSettingBase):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    organization_id: UUID
    created_at: datetime
    updated_at: datetime
