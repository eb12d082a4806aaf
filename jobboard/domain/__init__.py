"""Domain models for the job board."""

from .models import (
    CareerLevel,
    EmploymentType,
    Job,
    JobStatus,
    RemoteRegion,
    Salary,
    SalaryUnit,
    StoreRecord,
    VisaSponsorship,
    WorkplaceType,
)

__all__ = [
    "Job",
    "Salary",
    "StoreRecord",
    "CareerLevel",
    "EmploymentType",
    "JobStatus",
    "RemoteRegion",
    "SalaryUnit",
    "VisaSponsorship",
    "WorkplaceType",
]
