"""Tests for Pydantic create/read schemas."""

import uuid

import pytest
from pydantic import ValidationError

from jobboard.models import ApplicationStage, ExperienceLevel, JobListingApplication, JobListingStatus
from jobboard.schemas import (
    JobListingApplicationCreate,
    JobListingApplicationRead,
    JobListingCreate,
    JobListingRead,
    JobListingWithOrganization,
    OrganizationRead,
    UserCreate,
    UserRead,
)


@pytest.fixture
def listing_payload():
    return {
        "organization_id": str(uuid.uuid4()),
        "title": "Platform Engineer",
        "location_requirement": "remote",
        "experience_level": "senior",
        "type": "full_time",
    }


class TestJobListingSchemas:
    def test_create_defaults(self, listing_payload):
        listing = JobListingCreate(**listing_payload)

        assert listing.status == JobListingStatus.DRAFT
        assert listing.is_featured is False
        assert listing.experience_level == ExperienceLevel.SENIOR
        assert listing.wage_interval is None

    def test_create_rejects_unknown_enum_value(self, listing_payload):
        listing_payload["type"] = "contract"

        with pytest.raises(ValidationError):
            JobListingCreate(**listing_payload)

    @pytest.mark.parametrize("missing", ["location_requirement", "experience_level", "type"])
    def test_create_requires_enum_fields(self, listing_payload, missing):
        del listing_payload[missing]

        with pytest.raises(ValidationError):
            JobListingCreate(**listing_payload)

    def test_read_from_orm(self, make_organization, make_job_listing):
        org = make_organization()
        listing = make_job_listing(org, state_abbreviation="NY", city="New York")

        read = JobListingWithOrganization.model_validate(listing)

        assert read.id == listing.id
        assert read.status == JobListingStatus.DRAFT
        assert read.state_abbreviation == "NY"
        assert read.organization.name == org.name

    def test_create_limits_state_abbreviation(self, listing_payload):
        listing_payload["state_abbreviation"] = "Texas"

        with pytest.raises(ValidationError):
            JobListingCreate(**listing_payload)

    def test_read_accepts_any_stored_state(self, make_organization, make_job_listing):
        listing = make_job_listing(make_organization(), state_abbreviation="Texas")

        read = JobListingRead.model_validate(listing)

        assert read.state_abbreviation == "Texas"


class TestUserSchemas:
    def test_create_validates_email(self):
        with pytest.raises(ValidationError):
            UserCreate(name="Jane", image_url="https://x/j.png", email="not-an-email")

    def test_read_from_orm(self, make_user):
        user = make_user(email="jane@example.com")

        read = UserRead.model_validate(user)

        assert read.email == "jane@example.com"
        assert read.created_at is not None

    def test_read_accepts_any_stored_email(self, make_user):
        user = make_user(email="admin@localhost")

        read = UserRead.model_validate(user)

        assert read.email == "admin@localhost"


class TestApplicationSchemas:
    def test_create_stage_default(self):
        application = JobListingApplicationCreate(user_id=uuid.uuid4(), job_listing_id=uuid.uuid4())

        assert application.stage == ApplicationStage.APPLIED

    def test_read_from_orm(self, db_session, make_user, make_organization, make_job_listing):
        org = make_organization()
        user = make_user()
        listing = make_job_listing(org)
        application = JobListingApplication(user_id=user.id, job_listing_id=listing.id, rating=4)
        db_session.add(application)
        db_session.commit()

        read = JobListingApplicationRead.model_validate(application)

        assert read.stage == ApplicationStage.APPLIED
        assert read.rating == 4
        assert OrganizationRead.model_validate(org).id == org.id
