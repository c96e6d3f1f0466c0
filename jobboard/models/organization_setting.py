"""Organization setting model — per-member notification preferences."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, PrimaryKeyConstraint, false
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin


class OrganizationSetting(TimestampMixin, Base):
    __tablename__ = "organization_settings"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE", name="organization_settings_user_id_users_id_fk"),
        nullable=False,
    )
    organization_id = Column(
        UUID(as_uuid=True),
        ForeignKey(
            "organizations.id",
            ondelete="CASCADE",
            name="organization_settings_organization_id_organizations_id_fk",
        ),
        nullable=False,
    )
    new_application_email_notifications = Column(
        Boolean, default=False, server_default=false(), nullable=False,
    )
    minimum_rating = Column(Integer)

    # Relationships
    user = relationship("User", back_populates="organization_settings")
    organization = relationship("Organization", back_populates="organization_settings")

    __table_args__ = (
        PrimaryKeyConstraint(
            "user_id", "organization_id", name="organization_settings_user_id_organization_id_pk",
        ),
    )

    def __repr__(self):
        return f"<OrganizationSetting(user_id={self.user_id}, organization_id={self.organization_id})>"
