"""Organization model — employers that post job listings."""

from sqlalchemy import Column, Text
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin, UUIDMixin


class Organization(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "organizations"

    name = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)

    # Relationships
    job_listings = relationship(
        "JobListing", back_populates="organization",
        cascade="all, delete", passive_deletes=True,
    )
    organization_settings = relationship(
        "OrganizationSetting", back_populates="organization",
        cascade="all, delete", passive_deletes=True,
    )

    def __repr__(self):
        return f"<Organization(id={self.id}, name='{self.name}')>"
