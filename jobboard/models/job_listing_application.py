"""Job listing application model — one application per user per listing."""

from sqlalchemy import Column, ForeignKey, Integer, PrimaryKeyConstraint, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin
from jobboard.models.enums import ApplicationStage, stage_enum


class JobListingApplication(TimestampMixin, Base):
    __tablename__ = "job_listing_applications"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE", name="job_listing_applications_user_id_users_id_fk"),
        nullable=False,
    )
    job_listing_id = Column(
        UUID(as_uuid=True),
        ForeignKey(
            "job_listings.id",
            ondelete="CASCADE",
            name="job_listing_applications_job_listing_id_job_listings_id_fk",
        ),
        nullable=False,
    )
    cover_letter = Column(Text)
    stage = Column(
        "stage", stage_enum,
        default=ApplicationStage.APPLIED, server_default=ApplicationStage.APPLIED.value, nullable=False,
    )
    rating = Column(Integer)

    # Relationships
    user = relationship("User", back_populates="applications")
    job_listing = relationship("JobListing", back_populates="applications")

    __table_args__ = (
        PrimaryKeyConstraint(
            "user_id", "job_listing_id", name="job_listing_applications_user_id_job_listing_id_pk",
        ),
    )

    def __repr__(self):
        return (
            f"<JobListingApplication(user_id={self.user_id}, "
            f"job_listing_id={self.job_listing_id}, stage={self.stage})>"
        )
