"""Category pages (type, career level, location, language) and facet counts."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from jobboard.constants.languages import LANGUAGE_CODES
from jobboard.domain.models import CareerLevel, EmploymentType, Job, WorkplaceType
from jobboard.utils.slugify import create_location_slug

REMOTE_LOCATION_SLUG = "remote"


def job_type_from_slug(slug: str) -> Optional[EmploymentType]:
    """Resolve a type slug such as ``full-time``."""
    wanted = slug.strip().lower()
    for kind in EmploymentType:
        if kind.value.lower() == wanted:
            return kind
    return None


def career_level_from_slug(slug: str) -> Optional[CareerLevel]:
    """Resolve a level slug such as ``entrylevel``; NotSpecified has no page."""
    wanted = slug.strip().lower()
    for level in CareerLevel:
        if level is not CareerLevel.NOT_SPECIFIED and level.value.lower() == wanted:
            return level
    return None


def jobs_for_type(jobs: Sequence[Job], slug: str) -> Optional[List[Job]]:
    """Jobs of one employment type, or None for an unknown type slug."""
    kind = job_type_from_slug(slug)
    if kind is None:
        return None
    return [job for job in jobs if job.type == kind]


def jobs_for_career_level(jobs: Sequence[Job], slug: str) -> Optional[List[Job]]:
    """Jobs targeting one career level, or None for an unknown level slug."""
    level = career_level_from_slug(slug)
    if level is None:
        return None
    return [job for job in jobs if level in job.career_level]


def jobs_for_location(jobs: Sequence[Job], slug: str) -> Optional[List[Job]]:
    """Remote jobs for ``remote``, otherwise jobs in the country with that slug.

    Countries are discovered from the jobs themselves, so a slug matching no
    job's country is unknown and yields None.
    """
    wanted = slug.strip().lower()
    if wanted == REMOTE_LOCATION_SLUG:
        return [job for job in jobs if job.workplace_type == WorkplaceType.REMOTE]

    matched = [
        job
        for job in jobs
        if job.workplace_country and create_location_slug(job.workplace_country) == wanted
    ]
    return matched or None


def jobs_for_language(jobs: Sequence[Job], code: str) -> Optional[List[Job]]:
    """Jobs requiring one language, or None for an unsupported code."""
    wanted = code.strip().lower()
    if wanted not in LANGUAGE_CODES:
        return None
    return [job for job in jobs if wanted in job.languages]


@dataclass
class FacetCounts:
    """
    Job counts per category, as shown on the browse-by pages.

    Attributes:
        types: Jobs per employment type
        career_levels: Jobs per career level (NotSpecified excluded)
        countries: Jobs per workplace country name
        cities: Jobs per workplace city name
        languages: Jobs per language code
        remote: Number of remote jobs
    """

    types: Dict[EmploymentType, int] = field(default_factory=dict)
    career_levels: Dict[CareerLevel, int] = field(default_factory=dict)
    countries: Dict[str, int] = field(default_factory=dict)
    cities: Dict[str, int] = field(default_factory=dict)
    languages: Dict[str, int] = field(default_factory=dict)
    remote: int = 0

    @staticmethod
    def by_count(counts: Dict) -> List[tuple]:
        """(key, count) pairs, most common first."""
        return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def count_facets(jobs: Sequence[Job]) -> FacetCounts:
    """Aggregate category counts over a job list."""
    types: Counter = Counter()
    levels: Counter = Counter()
    countries: Counter = Counter()
    cities: Counter = Counter()
    languages: Counter = Counter()
    remote = 0

    for job in jobs:
        if job.type is not None:
            types[job.type] += 1
        for level in job.career_level:
            if level is not CareerLevel.NOT_SPECIFIED:
                levels[level] += 1
        if job.workplace_country:
            countries[job.workplace_country] += 1
        if job.workplace_city:
            cities[job.workplace_city] += 1
        for code in job.languages:
            languages[code] += 1
        if job.workplace_type == WorkplaceType.REMOTE:
            remote += 1

    return FacetCounts(
        types=dict(types),
        career_levels=dict(levels),
        countries=dict(countries),
        cities=dict(cities),
        languages=dict(languages),
        remote=remote,
    )
