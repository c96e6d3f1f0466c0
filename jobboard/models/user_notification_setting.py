"""User notification setting model — one row per user."""

from sqlalchemy import Boolean, Column, ForeignKey, PrimaryKeyConstraint, Text, false
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin


class UserNotificationSetting(TimestampMixin, Base):
    __tablename__ = "user_notification_settings"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE", name="user_notification_settings_user_id_users_id_fk"),
        nullable=False,
    )
    new_job_email_notifications = Column(Boolean, default=False, server_default=false(), nullable=False)
    is_prompt = Column(Text)  # free-text filter for new job alerts

    # Relationships
    user = relationship("User", back_populates="notification_settings")

    __table_args__ = (
        PrimaryKeyConstraint("user_id", name="user_notification_settings_user_id_pk"),
    )

    def __repr__(self):
        return f"<UserNotificationSetting(user_id={self.user_id})>"
