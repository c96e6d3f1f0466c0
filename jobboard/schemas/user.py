"""Pydantic schemas for User and its one-per-user settings."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr


class UserBase(BaseModel):
    """Base fields for user."""

    name: str
    image_url: str
    email: str


class UserCreate(UserBase):
    """Fields for creating a user."""

    email: EmailStr


class UserRead(UserBase):
    """Full user output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class UserNotificationSettingBase(BaseModel):
    new_job_email_notifications: bool = False
    is_prompt: str | None = None


class UserNotificationSettingCreate(UserNotificationSettingBase):
    user_id: UUID


class UserNotificationSettingRead(UserNotificationSettingBase):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    created_at: datetime
    updated_at: datetime


class UserResumeBase(BaseModel):
    resume_file_url: str
    resume_file_key: str
    ai_summary: str | None = None


class UserResumeCreate(UserResumeBase):
    user_id: UUID


class UserResumeRead(UserResumeBase):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    created_at: datetime
    updated_at: datetime
