"""
Pytest configuration and fixtures.

Every test gets its own in-memory SQLite database created through the
project's ``Database`` handle, so foreign keys and ON DELETE CASCADE are
enforced the same way the Postgres schema enforces them.
"""

import pytest

from jobboard.db import Database
from jobboard.models import (
    ExperienceLevel,
    JobListing,
    JobListingType,
    LocationRequirement,
    Organization,
    User,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def database():
    """Fresh database with all tables, using the sync engine."""
    db = Database(TEST_DATABASE_URL)
    db.create_all_sync()
    yield db
    db.metadata.drop_all(db.sync_engine)
    db.sync_engine.dispose()


@pytest.fixture
def db_session(database):
    session = database.sync_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
async def async_database():
    """Fresh database with all tables, using the async engine."""
    db = Database(TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        data = {
            "name": f"User {counter['n']}",
            "image_url": f"https://images.example.com/users/{counter['n']}.png",
            "email": f"user{counter['n']}@example.com",
        }
        data.update(overrides)
        user = User(**data)
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def make_organization(db_session):
    def _make_organization(name="Acme Corp"):
        org = Organization(name=name, image_url="https://images.example.com/orgs/acme.png")
        db_session.add(org)
        db_session.commit()
        return org

    return _make_organization


@pytest.fixture
def make_job_listing(db_session):
    def _make_job_listing(organization, **overrides):
        data = {
            "organization_id": organization.id,
            "title": "Backend Engineer",
            "location_requirement": LocationRequirement.REMOTE,
            "experience_level": ExperienceLevel.MID_LEVEL,
            "type": JobListingType.FULL_TIME,
        }
        data.update(overrides)
        listing = JobListing(**data)
        db_session.add(listing)
        db_session.commit()
        return listing

    return _make_job_listing
