"""Utility functions for slugs, markdown cleanup, and time handling."""

from .markdown import normalize_markdown
from .slugify import create_location_slug, generate_job_slug, slugify
from .timestamps import (
    ensure_utc,
    format_job_date,
    format_rfc822,
    format_timestamp,
    parse_iso_datetime,
    sortable_date,
    utc_now,
)

__all__ = [
    # Slugs
    "slugify",
    "generate_job_slug",
    "create_location_slug",
    # Markdown
    "normalize_markdown",
    # Timestamps
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    "sortable_date",
    "format_timestamp",
    "format_rfc822",
    "format_job_date",
]
