"""Markdown cleanup for job descriptions coming from the record store."""

import re
from typing import Any

_TRAILING_SPACE = re.compile(r"[ \t]+\n")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_BULLET = re.compile(r"^[ \t]*[•●▪◦]\s*", re.MULTILINE)


def normalize_markdown(text: Any) -> str:
    """Normalize markdown text.

    Performs the following transformations:
    1. Convert CRLF/CR line endings to LF
    2. Replace non-breaking spaces with regular spaces
    3. Turn unicode bullet characters into markdown list items
    4. Strip trailing whitespace from each line
    5. Collapse three or more newlines into a paragraph break
    6. Strip leading/trailing whitespace

    Args:
        text: Raw description value (non-strings are converted, None is empty)

    Returns:
        Normalized markdown string
    """
    if not text:
        return ""

    normalized = str(text).replace("\r\n", "\n").replace("\r", "\n")
    normalized = normalized.replace("\u00a0", " ")
    normalized = _BULLET.sub("- ", normalized)
    normalized = _TRAILING_SPACE.sub("\n", normalized)
    normalized = _EXCESS_NEWLINES.sub("\n\n", normalized)
    return normalized.strip()
