"""Normalization of raw store records into Job domain models."""

from .fields import (
    normalize_application_requirements,
    normalize_benefits,
    normalize_career_level,
    normalize_currency,
    normalize_employment_type,
    normalize_featured,
    normalize_languages,
    normalize_optional_text,
    normalize_remote_region,
    normalize_salary,
    normalize_salary_amount,
    normalize_salary_unit,
    normalize_status,
    normalize_text,
    normalize_visa_sponsorship,
    normalize_workplace_type,
)
from .service import JobNormalizer

__all__ = [
    "JobNormalizer",
    "normalize_application_requirements",
    "normalize_benefits",
    "normalize_career_level",
    "normalize_currency",
    "normalize_employment_type",
    "normalize_featured",
    "normalize_languages",
    "normalize_optional_text",
    "normalize_remote_region",
    "normalize_salary",
    "normalize_salary_amount",
    "normalize_salary_unit",
    "normalize_status",
    "normalize_text",
    "normalize_visa_sponsorship",
    "normalize_workplace_type",
]
