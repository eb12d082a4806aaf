"""Query and result models for the listing pipeline."""

import math
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from jobboard.config.models import JobListingsConfig, SortOrder
from jobboard.constants.languages import LANGUAGE_CODES
from jobboard.domain.models import CareerLevel, EmploymentType, Job

T = TypeVar("T")

TRUE_FLAG = "true"


class SalaryRange(str, Enum):
    """Annual-USD salary buckets, valued by their URL labels."""

    UNDER_50K = "< $50K"
    FROM_50K_TO_100K = "$50K - $100K"
    FROM_100K_TO_200K = "$100K - $200K"
    OVER_200K = "> $200K"

    def contains(self, annual: float) -> bool:
        """Whether an annual-USD value falls inside this bucket."""
        if self is SalaryRange.UNDER_50K:
            return annual < 50000
        if self is SalaryRange.FROM_50K_TO_100K:
            return 50000 <= annual <= 100000
        if self is SalaryRange.FROM_100K_TO_200K:
            return 100000 < annual <= 200000
        return annual > 200000


class ListingQuery(BaseModel):
    """Search, facet, sort and pagination parameters for one listing request."""

    search: str = ""
    types: List[EmploymentType] = Field(default_factory=list)
    roles: List[CareerLevel] = Field(default_factory=list)
    remote: bool = False
    visa: bool = False
    salary_ranges: List[SalaryRange] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    sort: SortOrder = SortOrder.NEWEST
    page: int = 1
    per_page: int = Field(10, ge=1, le=100)

    model_config = {"frozen": True}

    @field_validator("search")
    @classmethod
    def strip_search(cls, v: str) -> str:
        return v.strip()

    @field_validator("languages")
    @classmethod
    def lowercase_languages(cls, v: List[str]) -> List[str]:
        return [code.strip().lower() for code in v if code and code.strip()]

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        defaults: Optional[JobListingsConfig] = None,
    ) -> "ListingQuery":
        """Build a query from URL query parameters.

        Recognized keys: ``q``, ``types``, ``roles``, ``remote``, ``salary``,
        ``visa``, ``languages`` (lists are comma-separated, flags are the
        literal ``"true"``), ``sort``, ``page`` and ``per_page``. Unknown list
        entries are dropped and unusable numbers fall back to the defaults.
        """
        defaults = defaults or JobListingsConfig()

        return cls(
            search=str(params.get("q") or ""),
            types=_parse_list(params.get("types"), EmploymentType),
            roles=_parse_list(params.get("roles"), CareerLevel),
            remote=params.get("remote") == TRUE_FLAG,
            visa=params.get("visa") == TRUE_FLAG,
            salary_ranges=_parse_list(params.get("salary"), SalaryRange),
            languages=[
                code
                for code in _split(params.get("languages"))
                if code.lower() in LANGUAGE_CODES
            ],
            sort=_parse_enum(params.get("sort"), SortOrder, SortOrder(defaults.default_sort_order)),
            page=_parse_positive_int(params.get("page"), 1),
            per_page=min(_parse_positive_int(params.get("per_page"), defaults.default_per_page), 100),
        )

    def to_params(self) -> dict:
        """Inverse of ``from_params``, omitting values left at their defaults."""
        params = {}
        if self.search:
            params["q"] = self.search
        if self.types:
            params["types"] = ",".join(t.value for t in self.types)
        if self.roles:
            params["roles"] = ",".join(r.value for r in self.roles)
        if self.remote:
            params["remote"] = TRUE_FLAG
        if self.salary_ranges:
            params["salary"] = ",".join(r.value for r in self.salary_ranges)
        if self.visa:
            params["visa"] = TRUE_FLAG
        if self.languages:
            params["languages"] = ",".join(self.languages)
        params["sort"] = self.sort.value
        params["page"] = str(self.page)
        params["per_page"] = str(self.per_page)
        return params


class ListingPage(BaseModel):
    """One page of listing results."""

    items: List[Job]
    total: int = Field(..., ge=0, description="Matches before pagination")
    page: int
    per_page: int = Field(..., ge=1)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def _split(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(item) for item in value]
    else:
        parts = str(value).split(",")
    return [part.strip() for part in parts if part.strip()]


def _parse_enum(value: Any, enum_cls: Callable[[str], T], default: T) -> T:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _parse_list(value: Any, enum_cls: Callable[[str], T]) -> List[T]:
    parsed: List[T] = []
    for part in _split(value):
        try:
            item = enum_cls(part)
        except ValueError:
            continue
        if item not in parsed:
            parsed.append(item)
    return parsed


def _parse_positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default
