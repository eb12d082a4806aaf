"""Job listing pipeline and category views."""

from .categories import (
    FacetCounts,
    career_level_from_slug,
    count_facets,
    job_type_from_slug,
    jobs_for_career_level,
    jobs_for_language,
    jobs_for_location,
    jobs_for_type,
)
from .engine import filter_jobs, paginate, pin_featured, run_listing, sort_jobs
from .models import ListingPage, ListingQuery, SalaryRange

__all__ = [
    "FacetCounts",
    "ListingPage",
    "ListingQuery",
    "SalaryRange",
    "career_level_from_slug",
    "count_facets",
    "filter_jobs",
    "job_type_from_slug",
    "jobs_for_career_level",
    "jobs_for_language",
    "jobs_for_location",
    "jobs_for_type",
    "paginate",
    "pin_featured",
    "run_listing",
    "sort_jobs",
]
