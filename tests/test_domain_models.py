"""Unit tests for domain models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from jobboard.domain.models import (
    CareerLevel,
    Job,
    JobStatus,
    Salary,
    SalaryUnit,
    StoreRecord,
    VisaSponsorship,
    WorkplaceType,
)


class TestStoreRecord:
    """Tests for StoreRecord model."""

    def test_valid_record(self):
        """Test creating a record with created time and fields."""
        record = StoreRecord(
            id="recA1b2C3d4E5f6G7",
            created_time=datetime(2025, 11, 1, 12, 0, 0, tzinfo=timezone.utc),
            fields={"title": "Engineer", "salary_min": "100000"},
        )

        assert record.id == "recA1b2C3d4E5f6G7"
        assert record.fields["salary_min"] == "100000"

    def test_id_is_stripped(self):
        """Test that the record id is stripped of whitespace."""
        assert StoreRecord(id="  rec123  ").id == "rec123"

    @pytest.mark.parametrize("record_id", ["", "   "])
    def test_empty_id_rejected(self, record_id):
        """Test that an empty id is rejected."""
        with pytest.raises(ValidationError):
            StoreRecord(id=record_id)

    def test_fields_default_empty(self):
        """Test that fields default to an empty dict."""
        assert StoreRecord(id="rec1").fields == {}


class TestSalary:
    """Tests for Salary value object."""

    def test_defaults(self):
        """Test USD/year defaults."""
        salary = Salary(min=100000)

        assert salary.currency == "USD"
        assert salary.unit == SalaryUnit.YEAR
        assert salary.max is None

    def test_negative_rejected(self):
        """Test that negative bounds are rejected."""
        with pytest.raises(ValidationError):
            Salary(min=-1)

    def test_currency_must_be_three_letters(self):
        """Test currency length validation."""
        with pytest.raises(ValidationError):
            Salary(min=1, currency="EURO")

    def test_frozen(self):
        """Test that salary cannot be mutated."""
        salary = Salary(min=1)
        with pytest.raises(ValidationError):
            salary.min = 2


class TestJob:
    """Tests for Job model."""

    def test_minimal_job_defaults(self):
        """Test the defaults applied to a minimal job."""
        job = Job(id="rec1")

        assert job.career_level == [CareerLevel.NOT_SPECIFIED]
        assert job.visa_sponsorship == VisaSponsorship.NOT_SPECIFIED
        assert job.workplace_type == WorkplaceType.NOT_SPECIFIED
        assert job.status == JobStatus.ACTIVE
        assert job.remote_region is None
        assert job.type is None
        assert job.salary is None
        assert job.languages == []
        assert job.featured is False

    def test_enum_values_parsed(self):
        """Test that enum fields accept their string values."""
        job = Job(
            id="rec1",
            type="Part-time",
            career_level=["Senior", "Lead"],
            workplace_type="Hybrid",
            remote_region="EU Only",
            visa_sponsorship="Yes",
        )

        assert job.career_level == [CareerLevel.SENIOR, CareerLevel.LEAD]
        assert job.workplace_type == WorkplaceType.HYBRID
        assert job.visa_sponsorship == VisaSponsorship.YES

    def test_empty_career_level_rejected(self):
        """Test that career_level can never be empty."""
        with pytest.raises(ValidationError):
            Job(id="rec1", career_level=[])

    def test_benefits_length_limit(self):
        """Test the 1000 character cap on benefits."""
        with pytest.raises(ValidationError):
            Job(id="rec1", benefits="x" * 1001)

    def test_unknown_workplace_type_rejected(self):
        """Test that the model itself does not coerce unknown values."""
        with pytest.raises(ValidationError):
            Job(id="rec1", workplace_type="Moon base")

    def test_frozen(self):
        """Test that jobs are immutable."""
        job = Job(id="rec1", title="Engineer")
        with pytest.raises(ValidationError):
            job.title = "Manager"

    def test_is_active(self):
        """Test the is_active property."""
        assert Job(id="rec1").is_active is True
        assert Job(id="rec2", status="inactive").is_active is False
