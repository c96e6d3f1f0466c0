"""Seed a small sample dataset for local development.

Creates a few organizations with job listings, job seekers with resumes and
notification settings, organization members with notification preferences,
and applications. Re-running skips rows that already exist.

Usage:
    alembic upgrade head
    DATABASE_URL=postgresql+asyncpg://... python -m scripts.seed_sample_data
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from jobboard.config import get_settings
from jobboard.db import get_database
from jobboard.logging_config import setup_logging
from jobboard.models import (
    ApplicationStage,
    ExperienceLevel,
    JobListing,
    JobListingApplication,
    JobListingStatus,
    JobListingType,
    LocationRequirement,
    Organization,
    OrganizationSetting,
    User,
    UserNotificationSetting,
    UserResume,
    WageInterval,
)

logger = logging.getLogger(__name__)

ORGANIZATIONS = [
    {
        "name": "Northwind Analytics",
        "image_url": "https://images.example.com/orgs/northwind.png",
        "listings": [
            {
                "title": "Data Engineer",
                "description": "Build and maintain batch and streaming pipelines.",
                "wage": 135000,
                "wage_interval": WageInterval.YEARLY,
                "state_abbreviation": "TX",
                "city": "Austin",
                "is_featured": True,
                "location_requirement": LocationRequirement.HYBRID,
                "status": JobListingStatus.PUBLISHED,
                "experience_level": ExperienceLevel.MID_LEVEL,
                "type": JobListingType.FULL_TIME,
            },
            {
                "title": "Analytics Intern",
                "wage": 25,
                "wage_interval": WageInterval.HOURLY,
                "location_requirement": LocationRequirement.REMOTE,
                "experience_level": ExperienceLevel.JUNIOR,
                "type": JobListingType.INTERNSHIP,
            },
        ],
    },
    {
        "name": "Bluebird Health",
        "image_url": "https://images.example.com/orgs/bluebird.png",
        "listings": [
            {
                "title": "Senior Backend Engineer",
                "description": "Own the claims processing services.",
                "wage": 180000,
                "wage_interval": WageInterval.YEARLY,
                "state_abbreviation": "CO",
                "city": "Denver",
                "location_requirement": LocationRequirement.IN_OFFICE,
                "status": JobListingStatus.PUBLISHED,
                "experience_level": ExperienceLevel.SENIOR,
                "type": JobListingType.FULL_TIME,
            },
        ],
    },
]

USERS = [
    {
        "name": "Ada Park",
        "email": "ada.park@example.com",
        "image_url": "https://images.example.com/users/ada.png",
        "resume": {
            "resume_file_url": "https://files.example.com/resumes/ada.pdf",
            "resume_file_key": "resumes/ada.pdf",
        },
        "new_job_email_notifications": True,
        "is_prompt": "Remote data roles",
        "applications": [("Northwind Analytics", "Data Engineer", ApplicationStage.INTERESTED)],
    },
    {
        "name": "Sam Reyes",
        "email": "sam.reyes@example.com",
        "image_url": "https://images.example.com/users/sam.png",
        "resume": None,
        "new_job_email_notifications": False,
        "is_prompt": None,
        "applications": [("Bluebird Health", "Senior Backend Engineer", ApplicationStage.APPLIED)],
        # Member of Northwind's hiring team
        "organization_settings": [("Northwind Analytics", True, 3)],
    },
]


def _get_or_create_organization(db: Session, org_data: dict) -> tuple[Organization, bool]:
    org = db.query(Organization).filter(Organization.name == org_data["name"]).first()
    if org:
        return org, False
    org = Organization(name=org_data["name"], image_url=org_data["image_url"])
    db.add(org)
    db.flush()
    return org, True


def seed(db: Session) -> dict:
    """Insert the sample dataset through ``db`` and commit. Returns created counts."""
    counts = {"organizations": 0, "job_listings": 0, "users": 0, "applications": 0}
    listings = {}

    # 1. Organizations and their listings
    for org_data in ORGANIZATIONS:
        org, created = _get_or_create_organization(db, org_data)
        if created:
            counts["organizations"] += 1
            logger.info("Created organization: %s", org.name)

        for listing_data in org_data["listings"]:
            listing = db.query(JobListing).filter(
                JobListing.organization_id == org.id,
                JobListing.title == listing_data["title"],
            ).first()
            if not listing:
                listing = JobListing(organization_id=org.id, **listing_data)
                if listing.status == JobListingStatus.PUBLISHED:
                    listing.posted_at = datetime.now(timezone.utc).replace(tzinfo=None)
                db.add(listing)
                db.flush()
                counts["job_listings"] += 1
            listings[(org.name, listing.title)] = listing

    # 2. Users with their settings and applications
    for user_data in USERS:
        user = db.query(User).filter(User.email == user_data["email"]).first()
        if user:
            logger.info("Skipped: %s already exists", user.email)
            continue

        user = User(
            name=user_data["name"],
            email=user_data["email"],
            image_url=user_data["image_url"],
        )
        user.notification_settings = UserNotificationSetting(
            new_job_email_notifications=user_data["new_job_email_notifications"],
            is_prompt=user_data["is_prompt"],
        )
        if user_data["resume"]:
            user.resume = UserResume(**user_data["resume"])
        db.add(user)
        db.flush()
        counts["users"] += 1

        for org_name, title, stage in user_data["applications"]:
            db.add(JobListingApplication(
                user_id=user.id,
                job_listing_id=listings[(org_name, title)].id,
                stage=stage,
            ))
            counts["applications"] += 1

        for org_name, notify, minimum_rating in user_data.get("organization_settings", []):
            org = db.query(Organization).filter(Organization.name == org_name).one()
            db.add(OrganizationSetting(
                user_id=user.id,
                organization_id=org.id,
                new_application_email_notifications=notify,
                minimum_rating=minimum_rating,
            ))

        logger.info("Created user: %s", user.email)

    db.commit()
    return counts


def main():
    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.json_logs, debug=settings.debug)

    db = get_database().sync_session_factory()
    try:
        counts = seed(db)
        logger.info("Seed complete: %s", counts)
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
