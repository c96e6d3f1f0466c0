"""User resume model — uploaded resume file and its AI summary."""

from sqlalchemy import Column, ForeignKey, PrimaryKeyConstraint, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from jobboard.models.base import Base, TimestampMixin


class UserResume(TimestampMixin, Base):
    __tablename__ = "user_resumes"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE", name="user_resumes_user_id_users_id_fk"),
        nullable=False,
    )
    resume_file_url = Column(Text, nullable=False)
    resume_file_key = Column(Text, nullable=False)  # storage object key
    ai_summary = Column(Text)

    # Relationships
    user = relationship("User", back_populates="resume")

    __table_args__ = (
        PrimaryKeyConstraint("user_id", name="user_resumes_user_id_pk"),
    )

    def __repr__(self):
        return f"<UserResume(user_id={self.user_id}, resume_file_key='{self.resume_file_key}')>"
