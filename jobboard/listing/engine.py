"""Listing pipeline: search, facet filters, sort, featured pinning, pagination.

The stages always run in that order and every stage is stable, so the same
jobs and query always produce the same page.
"""

from typing import Iterable, List, Sequence

from jobboard.config.models import SortOrder
from jobboard.domain.models import Job, VisaSponsorship, WorkplaceType
from jobboard.logging import get_logger
from jobboard.salary import normalize_annual_salary
from jobboard.utils.timestamps import sortable_date

from .models import ListingPage, ListingQuery

logger = get_logger(__name__, component="listing")


def run_listing(jobs: Sequence[Job], query: ListingQuery) -> ListingPage:
    """Run the full pipeline and return the requested page."""
    matched = filter_jobs(jobs, query)
    ordered = pin_featured(sort_jobs(matched, query.sort))
    items = paginate(ordered, query.page, query.per_page)

    logger.debug(
        "Listing computed",
        extra={
            "event": "listing.page.computed",
            "input": len(jobs),
            "matched": len(ordered),
            "page": query.page,
            "per_page": query.per_page,
            "sort": query.sort.value,
        },
    )
    return ListingPage(items=items, total=len(ordered), page=query.page, per_page=query.per_page)


def matches_search(job: Job, term: str) -> bool:
    """Case-insensitive substring match on title, company, city or country."""
    needle = term.lower()
    haystacks = (job.title, job.company, job.workplace_city or "", job.workplace_country or "")
    return any(needle in value.lower() for value in haystacks)


def matches_facets(job: Job, query: ListingQuery) -> bool:
    """Whether a job passes every active facet filter."""
    if query.types and job.type not in query.types:
        return False
    if query.roles and not any(level in query.roles for level in job.career_level):
        return False
    if query.remote and job.workplace_type != WorkplaceType.REMOTE:
        return False
    if query.visa and job.visa_sponsorship != VisaSponsorship.YES:
        return False
    if query.salary_ranges:
        if job.salary is None:
            return False
        annual = normalize_annual_salary(job.salary)
        if not any(bucket.contains(annual) for bucket in query.salary_ranges):
            return False
    if query.languages and not any(code in query.languages for code in job.languages):
        return False
    return True


def filter_jobs(jobs: Iterable[Job], query: ListingQuery) -> List[Job]:
    """Apply the search term, then the facet filters."""
    result = list(jobs)
    if query.search:
        result = [job for job in result if matches_search(job, query.search)]
    return [job for job in result if matches_facets(job, query)]


def _salary_sort_value(job: Job) -> float:
    # Jobs without a salary rank as 0 here, not as the -1 annual sentinel
    if job.salary is None:
        return 0
    return normalize_annual_salary(job.salary)


def sort_jobs(jobs: Iterable[Job], order: SortOrder) -> List[Job]:
    """Stable sort by the selected order."""
    if order == SortOrder.OLDEST:
        return sorted(jobs, key=lambda job: sortable_date(job.posted_date))
    if order == SortOrder.SALARY:
        return sorted(jobs, key=_salary_sort_value, reverse=True)
    return sorted(jobs, key=lambda job: sortable_date(job.posted_date), reverse=True)


def pin_featured(jobs: Iterable[Job]) -> List[Job]:
    """Move featured jobs ahead of the rest, keeping relative order in each group."""
    return sorted(jobs, key=lambda job: not job.featured)


def paginate(jobs: Sequence[Job], page: int, per_page: int) -> List[Job]:
    """Slice one page; a page before the first or past the end is empty.

    Raises:
        ValueError: If per_page is below 1
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    if page < 1:
        return []
    start = (page - 1) * per_page
    return list(jobs[start:start + per_page])
