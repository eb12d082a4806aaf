"""Builds feed documents from normalized jobs."""

from datetime import datetime
from typing import Iterable, List, Optional, Union

from jobboard.config.models import FeedConfig, FeedFormat, SiteConfig
from jobboard.domain.models import Job
from jobboard.logging import get_logger
from jobboard.salary import NOT_SPECIFIED, format_salary
from jobboard.utils.slugify import generate_job_slug
from jobboard.utils.timestamps import format_job_date, parse_iso_datetime, utc_now

from .exceptions import FeedDisabledError
from .models import Feed, FeedItem

logger = get_logger(__name__, component="feeds")

FEED_PATHS = {
    FeedFormat.RSS: "/feed.xml",
    FeedFormat.ATOM: "/atom.xml",
    FeedFormat.JSON: "/feed.json",
}

FEATURED_IMAGE_PATH = "/featured-job.png"


def is_feed_enabled(feed_config: Optional[FeedConfig], feed_format: Union[FeedFormat, str]) -> bool:
    """Whether feeds are on and the given format is published."""
    if feed_config is None or not feed_config.enabled:
        return False

    fmt = FeedFormat(feed_format)
    formats = feed_config.formats
    if fmt == FeedFormat.RSS:
        return formats.rss
    if fmt == FeedFormat.ATOM:
        return formats.atom
    return formats.json_feed


def ensure_feed_enabled(feed_config: Optional[FeedConfig], feed_format: Union[FeedFormat, str]) -> None:
    """
    Raises:
        FeedDisabledError: If feeds are off or the format is not published
    """
    if not is_feed_enabled(feed_config, feed_format):
        raise FeedDisabledError(FeedFormat(feed_format).value)


def job_url(base_url: str, job: Job) -> str:
    return f"{base_url}/jobs/{generate_job_slug(job.title, job.company)}"


def format_location(job: Job) -> str:
    """e.g. "Hybrid - Berlin, Germany"."""
    location = job.workplace_type.value
    if job.workplace_city:
        location += f" - {job.workplace_city}"
    if job.workplace_country:
        location += f", {job.workplace_country}"
    return location


def create_job_description(job: Job, description_length: int) -> str:
    """Markdown body used for both the summary and content of a feed item."""
    salary = format_salary(job.salary, True) if job.salary else NOT_SPECIFIED
    job_type = job.type.value if job.type else NOT_SPECIFIED

    lines = [
        f"## {job.title} at {job.company}",
        "",
        f"**Type:** {job_type}",
        f"**Location:** {format_location(job)}",
        f"**Salary:** {salary}",
        f"**Posted:** {format_job_date(job.posted_date)}",
        "",
        f"{job.description[:description_length]}...",
        "",
        f"**Apply Now:** {job.apply_url}",
    ]
    return "\n".join(lines)


def job_categories(job: Job) -> List[str]:
    """Type, career levels, workplace type and language codes."""
    categories = []
    if job.type:
        categories.append(job.type.value)
    categories.extend(level.value for level in job.career_level)
    categories.append(job.workplace_type.value)
    categories.extend(job.languages)
    return categories


def build_feed_item(job: Job, base_url: str, description_length: int, fallback_date: datetime) -> FeedItem:
    url = job_url(base_url, job)
    body = create_job_description(job, description_length)

    return FeedItem(
        id=url,
        title=f"{job.title} at {job.company}",
        link=url,
        description=body,
        content=body,
        author_name=job.company,
        author_link=job.apply_url or None,
        date=parse_iso_datetime(job.posted_date) or fallback_date,
        image=f"{base_url}{FEATURED_IMAGE_PATH}" if job.featured else None,
        categories=job_categories(job),
    )


def build_feed(
    jobs: Iterable[Job],
    site: SiteConfig,
    feed_config: FeedConfig,
    now: Optional[datetime] = None,
) -> Feed:
    """
    Build a feed document from the repository job list.

    Inactive jobs are skipped. Items keep the input order. Jobs whose
    posted date cannot be parsed are dated ``now``.

    Args:
        jobs: Normalized jobs, typically from JobRepository.get_jobs()
        site: Site identity (title, description, base URL)
        feed_config: Feed settings (title override, description length)
        now: Generation time (defaults to the current UTC time)

    Returns:
        Feed ready for any of the renderers
    """
    updated = now or utc_now()
    base_url = site.url

    items = [
        build_feed_item(job, base_url, feed_config.description_length, updated)
        for job in jobs
        if job.is_active
    ]

    logger.info(
        "Built feed",
        extra={"event": "feed.build.completed", "items": len(items)},
    )

    return Feed(
        id=base_url,
        title=feed_config.title or f"{site.title} | Job Feed",
        description=site.description,
        link=base_url,
        image=f"{base_url}/opengraph-image.png",
        favicon=f"{base_url}/favicon.ico",
        copyright=f"All rights reserved {updated.year}",
        updated=updated,
        feed_links={fmt.value: f"{base_url}{path}" for fmt, path in FEED_PATHS.items()},
        items=items,
    )
