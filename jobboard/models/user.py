"""User model — job seekers and organization members."""

from sqlalchemy import Column, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin, UUIDMixin


class User(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    name = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    email = Column(Text, nullable=False)

    # Relationships (child rows are removed by ON DELETE CASCADE; replacing a
    # one-per-user row through its relationship updates it in place)
    notification_settings = relationship(
        "UserNotificationSetting", back_populates="user", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True,
    )
    resume = relationship(
        "UserResume", back_populates="user", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True,
    )
    organization_settings = relationship(
        "OrganizationSetting", back_populates="user",
        cascade="all, delete", passive_deletes=True,
    )
    applications = relationship(
        "JobListingApplication", back_populates="user",
        cascade="all, delete", passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("email", name="users_email_unique"),
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
