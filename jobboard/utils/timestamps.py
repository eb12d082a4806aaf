"""Timestamp utilities for UTC handling and date parsing.

This module provides utilities for working with job posting dates:
- Getting current UTC time
- Parsing ISO 8601 date and datetime strings
- Converting timezone-naive to timezone-aware UTC
- Formatting timestamps for feeds and display
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional

# Sort key for dates that cannot be parsed; they order as the oldest
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime is timezone-aware and in UTC.

    If the datetime is timezone-naive, it's treated as UTC.
    If the datetime has a different timezone, it's converted to UTC.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Timezone-aware datetime in UTC, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def parse_iso_datetime(iso_string: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 datetime string to UTC datetime.

    Supports various ISO 8601 formats:
    - 2025-11-04T12:00:00Z
    - 2025-11-04T12:00:00.000Z
    - 2025-11-04T12:00:00+00:00
    - 2025-11-04

    Args:
        iso_string: ISO 8601 formatted datetime string

    Returns:
        Timezone-aware datetime in UTC, or None if parsing fails

    Example:
        >>> dt = parse_iso_datetime("2025-11-04T12:00:00Z")
        >>> dt.year == 2025 and dt.month == 11 and dt.day == 4
        True
    """
    if not iso_string or not isinstance(iso_string, str) or not iso_string.strip():
        return None

    cleaned = iso_string.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(cleaned))
    except ValueError:
        # Date-only fallback for interpreters with a strict fromisoformat
        try:
            return ensure_utc(datetime.strptime(iso_string.strip()[:10], "%Y-%m-%d"))
        except ValueError:
            return None


def sortable_date(iso_string: Optional[str]) -> datetime:
    """Parse a posting date for ordering; unparseable dates sort as oldest."""
    return parse_iso_datetime(iso_string) or EPOCH


def format_timestamp(dt: datetime, include_microseconds: bool = False) -> str:
    """Format a datetime as ISO 8601 string in UTC.

    Args:
        dt: Datetime to format
        include_microseconds: Whether to include microseconds in output

    Returns:
        ISO 8601 formatted string with 'Z' suffix

    Example:
        >>> from datetime import datetime, timezone
        >>> dt = datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc)
        >>> format_timestamp(dt)
        '2025-11-04T12:00:00Z'
    """
    dt_utc = ensure_utc(dt)
    if dt_utc is None:
        return ""

    if include_microseconds:
        return dt_utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return dt_utc.strftime("%Y-%m-%dT%H:%M:%SZ")


def format_rfc822(dt: datetime) -> str:
    """Format a datetime for RSS <pubDate> elements.

    Example:
        >>> from datetime import datetime, timezone
        >>> format_rfc822(datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc))
        'Tue, 04 Nov 2025 12:00:00 +0000'
    """
    return format_datetime(ensure_utc(dt))


def format_job_date(posted_date: Optional[str]) -> str:
    """Format a posting date for humans, e.g. "November 4, 2025".

    Returns "Date not available" for missing input and "Invalid date" when
    the value cannot be parsed.
    """
    if not posted_date:
        return "Date not available"

    dt = parse_iso_datetime(posted_date)
    if dt is None:
        return "Invalid date"

    return f"{dt:%B} {dt.day}, {dt.year}"
