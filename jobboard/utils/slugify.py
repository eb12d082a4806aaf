"""URL slug generation for jobs and locations.

Job slugs are the externally visible identifier of a posting. They are
derived from title and company only, so two postings with the same title
at the same company share a slug; lookups resolve to the first match.
"""

import re
import unicodedata
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: Any) -> str:
    """Convert text to a lowercase, hyphen-separated, ASCII slug.

    Example:
        >>> slugify("  Senior Engineer (Backend) @ Café Corp ")
        'senior-engineer-backend-cafe-corp'
    """
    if text is None:
        return ""

    folded = unicodedata.normalize("NFKD", str(text))
    ascii_text = folded.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")


def generate_job_slug(title: Any, company: Any) -> str:
    """Generate the slug for a job from its title and company.

    Example:
        >>> generate_job_slug("Senior Software Engineer", "Example Corp")
        'senior-software-engineer-at-example-corp'
    """
    return slugify(f"{title or ''} at {company or ''}")


def create_location_slug(location: Any) -> str:
    """Generate the slug used by location category pages."""
    return slugify(location)
