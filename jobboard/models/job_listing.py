"""Job listing model — core listing table."""

from sqlalchemy import Column, Boolean, DateTime, ForeignKey, Index, Integer, Text, false
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin, UUIDMixin
from jobboard.models.enums import (
    JobListingStatus,
    experience_level_enum,
    location_requirement_enum,
    status_enum,
    type_enum,
    wage_interval_enum,
)


class JobListing(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "job_listings"

    organization_id = Column(
        UUID(as_uuid=True),
        ForeignKey(
            "organizations.id",
            ondelete="CASCADE",
            name="job_listings_organization_id_organizations_id_fk",
        ),
        nullable=False,
    )

    # Core
    title = Column(Text, nullable=False)
    description = Column(Text)

    # Pay
    wage = Column(Integer)
    wage_interval = Column("wageInterval", wage_interval_enum)

    # Location
    state_abbreviation = Column(Text)
    city = Column(Text)
    location_requirement = Column("locationRequirement", location_requirement_enum, nullable=False)

    # Classification (enum columns keep their camel-case storage names)
    is_featured = Column(Boolean, default=False, server_default=false(), nullable=False)
    status = Column(
        "status", status_enum,
        default=JobListingStatus.DRAFT, server_default=JobListingStatus.DRAFT.value, nullable=False,
    )
    experience_level = Column("experienceLevel", experience_level_enum, nullable=False)
    type = Column("type", type_enum, nullable=False)

    # Lifecycle
    posted_at = Column(DateTime())

    # Relationships
    organization = relationship("Organization", back_populates="job_listings")
    applications = relationship(
        "JobListingApplication", back_populates="job_listing",
        cascade="all, delete", passive_deletes=True,
    )

    __table_args__ = (
        Index("job_listings_state_abbreviation_index", "state_abbreviation"),
    )

    def __repr__(self):
        return f"<JobListing(id={self.id}, title='{self.title}', status={self.status})>"
