"""Core domain models for job postings.

This module defines the data structures used throughout the application:
- StoreRecord: raw row from the record store before normalization
- Salary: salary range value object
- Job: normalized, immutable job posting
- Enumerations for every constrained Job field
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class EmploymentType(str, Enum):
    """Employment types offered by job postings."""

    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    FREELANCE = "Freelance"


class CareerLevel(str, Enum):
    """Career levels a job can target."""

    INTERNSHIP = "Internship"
    ENTRY_LEVEL = "EntryLevel"
    ASSOCIATE = "Associate"
    JUNIOR = "Junior"
    MID_LEVEL = "MidLevel"
    SENIOR = "Senior"
    STAFF = "Staff"
    PRINCIPAL = "Principal"
    LEAD = "Lead"
    MANAGER = "Manager"
    SENIOR_MANAGER = "SeniorManager"
    DIRECTOR = "Director"
    SENIOR_DIRECTOR = "SeniorDirector"
    VP = "VP"
    SVP = "SVP"
    EVP = "EVP"
    C_LEVEL = "CLevel"
    FOUNDER = "Founder"
    NOT_SPECIFIED = "NotSpecified"


class WorkplaceType(str, Enum):
    """Where the work happens."""

    ON_SITE = "On-site"
    HYBRID = "Hybrid"
    REMOTE = "Remote"
    NOT_SPECIFIED = "Not specified"


class RemoteRegion(str, Enum):
    """Regions a remote job is open to."""

    WORLDWIDE = "Worldwide"
    AMERICAS_ONLY = "Americas Only"
    EUROPE_ONLY = "Europe Only"
    ASIA_PACIFIC_ONLY = "Asia-Pacific Only"
    US_ONLY = "US Only"
    EU_ONLY = "EU Only"
    UK_EU_ONLY = "UK/EU Only"
    US_CANADA_ONLY = "US/Canada Only"


class VisaSponsorship(str, Enum):
    """Visa sponsorship availability."""

    YES = "Yes"
    NO = "No"
    NOT_SPECIFIED = "Not specified"


class SalaryUnit(str, Enum):
    """Period a salary amount refers to."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    PROJECT = "project"


class JobStatus(str, Enum):
    """Publication status of a job posting."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class StoreRecord(BaseModel):
    """Raw record from the external record store before normalization.

    Field values are untyped; the normalization layer converts them into
    a Job domain model.
    """

    id: str = Field(..., description="Record identifier assigned by the store")
    created_time: Optional[datetime] = Field(None, description="When the record was created")
    fields: Dict[str, Any] = Field(default_factory=dict, description="Untyped field bag")

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        """Strip whitespace from the record id."""
        if not v or not v.strip():
            raise ValueError("Record id cannot be empty or whitespace-only")
        return v.strip()

    model_config = {"json_schema_extra": {"example": {
        "id": "recA1b2C3d4E5f6G7",
        "created_time": "2025-11-01T12:00:00Z",
        "fields": {
            "title": "Senior Software Engineer",
            "company": "Example Corp",
            "status": "active",
            "salary_min": 120000,
            "salary_currency": "USD (United States Dollar)",
        },
    }}}


class Salary(BaseModel):
    """Salary range value object."""

    min: Optional[float] = Field(None, ge=0, description="Lower bound")
    max: Optional[float] = Field(None, ge=0, description="Upper bound")
    currency: str = Field("USD", min_length=3, max_length=3, description="Currency code")
    unit: SalaryUnit = Field(SalaryUnit.YEAR, description="Period the amounts refer to")

    model_config = {"frozen": True}


class Job(BaseModel):
    """Normalized job posting.

    This is the canonical domain model for a job posting. Instances are
    rebuilt from store records on every fetch and never mutated afterwards.
    """

    id: str = Field(..., description="Store record identifier")
    title: str = Field("", description="Job title")
    company: str = Field("", description="Company name")
    type: Optional[EmploymentType] = Field(None, description="Employment type")
    salary: Optional[Salary] = Field(None, description="Salary range")
    description: str = Field("", description="Normalized markdown description")
    benefits: Optional[str] = Field(None, max_length=1000)
    application_requirements: Optional[str] = Field(None, max_length=1000)
    apply_url: str = Field("", description="Where to apply")
    posted_date: str = Field("", description="ISO date the job was posted")
    valid_through: Optional[str] = None
    job_identifier: Optional[str] = None
    job_source_name: Optional[str] = None
    status: JobStatus = JobStatus.ACTIVE
    career_level: List[CareerLevel] = Field(
        default_factory=lambda: [CareerLevel.NOT_SPECIFIED], min_length=1
    )
    visa_sponsorship: VisaSponsorship = VisaSponsorship.NOT_SPECIFIED
    featured: bool = False
    workplace_type: WorkplaceType = WorkplaceType.NOT_SPECIFIED
    remote_region: Optional[RemoteRegion] = None
    timezone_requirements: Optional[str] = None
    workplace_city: Optional[str] = None
    workplace_country: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

    # Structured-data fields, carried through unmodified
    skills: Optional[str] = None
    qualifications: Optional[str] = None
    education_requirements: Optional[str] = None
    experience_requirements: Optional[str] = None
    industry: Optional[str] = None
    occupational_category: Optional[str] = None
    responsibilities: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Whether the job is published."""
        return self.status == JobStatus.ACTIVE

    model_config = {"frozen": True, "json_schema_extra": {"example": {
        "id": "recA1b2C3d4E5f6G7",
        "title": "Senior Software Engineer",
        "company": "Example Corp",
        "type": "Full-time",
        "salary": {"min": 120000, "max": 160000, "currency": "USD", "unit": "year"},
        "description": "We are looking for a talented engineer...",
        "apply_url": "https://example.com/jobs/12345",
        "posted_date": "2025-11-01",
        "status": "active",
        "career_level": ["Senior"],
        "visa_sponsorship": "Not specified",
        "featured": False,
        "workplace_type": "Remote",
        "remote_region": "Worldwide",
        "languages": ["en"],
    }}}
