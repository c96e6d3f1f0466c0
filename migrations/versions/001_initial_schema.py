"""Initial schema — users, organizations, job listings, applications, settings, resumes.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

wage_interval_enum = postgresql.ENUM("hourly", "yearly", name="wage_interval_enum", create_type=False)
location_requirement_enum = postgresql.ENUM(
    "in_office", "hybrid", "remote", name="location_requirement_enum", create_type=False,
)
status_enum = postgresql.ENUM("draft", "published", "delisted", name="status_enum", create_type=False)
experience_level_enum = postgresql.ENUM(
    "junior", "mid_level", "senior", name="experience_level_enum", create_type=False,
)
type_enum = postgresql.ENUM("internship", "part_time", "full_time", name="type_enum", create_type=False)
stage_enum = postgresql.ENUM(
    "denied", "applied", "interested", "interviewed", "hired", name="stage_enum", create_type=False,
)

ENUMS = [
    wage_interval_enum,
    location_requirement_enum,
    status_enum,
    experience_level_enum,
    type_enum,
    stage_enum,
]


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum in ENUMS:
        enum.create(bind, checkfirst=True)

    # Users
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("image_url", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_unique"),
    )

    # Organizations
    op.create_table(
        "organizations",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("image_url", sa.Text, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="organizations_pkey"),
    )

    # Job listings
    op.create_table(
        "job_listings",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("wage", sa.Integer),
        sa.Column("wageInterval", wage_interval_enum),
        sa.Column("state_abbreviation", sa.Text),
        sa.Column("city", sa.Text),
        sa.Column("is_featured", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("locationRequirement", location_requirement_enum, nullable=False),
        sa.Column("status", status_enum, server_default="draft", nullable=False),
        sa.Column("experienceLevel", experience_level_enum, nullable=False),
        sa.Column("type", type_enum, nullable=False),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("posted_at", sa.DateTime()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="job_listings_pkey"),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"],
            name="job_listings_organization_id_organizations_id_fk", ondelete="CASCADE",
        ),
    )
    op.create_index("job_listings_state_abbreviation_index", "job_listings", ["state_abbreviation"])

    # Job listing applications
    op.create_table(
        "job_listing_applications",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("job_listing_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("cover_letter", sa.Text),
        sa.Column("stage", stage_enum, server_default="applied", nullable=False),
        sa.Column("rating", sa.Integer),
        *_timestamps(),
        sa.PrimaryKeyConstraint(
            "user_id", "job_listing_id", name="job_listing_applications_user_id_job_listing_id_pk",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="job_listing_applications_user_id_users_id_fk", ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["job_listing_id"], ["job_listings.id"],
            name="job_listing_applications_job_listing_id_job_listings_id_fk", ondelete="CASCADE",
        ),
    )

    # Organization settings
    op.create_table(
        "organization_settings",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "new_application_email_notifications", sa.Boolean,
            server_default=sa.text("false"), nullable=False,
        ),
        sa.Column("minimum_rating", sa.Integer),
        *_timestamps(),
        sa.PrimaryKeyConstraint(
            "user_id", "organization_id", name="organization_settings_user_id_organization_id_pk",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="organization_settings_user_id_users_id_fk", ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"],
            name="organization_settings_organization_id_organizations_id_fk", ondelete="CASCADE",
        ),
    )

    # User notification settings
    op.create_table(
        "user_notification_settings",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("new_job_email_notifications", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("is_prompt", sa.Text),
        *_timestamps(),
        sa.PrimaryKeyConstraint("user_id", name="user_notification_settings_user_id_pk"),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="user_notification_settings_user_id_users_id_fk", ondelete="CASCADE",
        ),
    )

    # User resumes
    op.create_table(
        "user_resumes",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("resume_file_url", sa.Text, nullable=False),
        sa.Column("resume_file_key", sa.Text, nullable=False),
        sa.Column("ai_summary", sa.Text),
        *_timestamps(),
        sa.PrimaryKeyConstraint("user_id", name="user_resumes_user_id_pk"),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="user_resumes_user_id_users_id_fk", ondelete="CASCADE",
        ),
    )


def downgrade() -> None:
    op.drop_table("user_resumes")
    op.drop_table("user_notification_settings")
    op.drop_table("organization_settings")
    op.drop_table("job_listing_applications")
    op.drop_index("job_listings_state_abbreviation_index", table_name="job_listings")
    op.drop_table("job_listings")
    op.drop_table("organizations")
    op.drop_table("users")

    bind = op.get_bind()
    for enum in reversed(ENUMS):
        enum.drop(bind, checkfirst=True)
