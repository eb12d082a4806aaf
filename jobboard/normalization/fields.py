"""Field normalizers for untyped record-store values.

Every function here accepts any value the record store can hand back
(strings, lists, numbers, booleans, None) and returns a valid domain value.
None of them raise: malformed input degrades to a fixed fallback.
"""

import math
import re
from typing import Any, List, Optional

from jobboard.constants.currencies import CURRENCY_CODES, get_currency_by_name
from jobboard.constants.languages import LANGUAGE_CODES, get_language_code_by_name
from jobboard.domain.models import (
    CareerLevel,
    EmploymentType,
    JobStatus,
    RemoteRegion,
    Salary,
    SalaryUnit,
    VisaSponsorship,
    WorkplaceType,
)

MAX_BENEFITS_LENGTH = 1000
MAX_REQUIREMENTS_LENGTH = 1000

DEFAULT_CURRENCY = "USD"

_LANGUAGE_CODE_SUFFIX = re.compile(r".*?\(([a-z]{2})\)$", re.IGNORECASE)
_CURRENCY_CODE_PREFIX = re.compile(r"^([A-Z]{2,5})\s*\(.*?\)$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")

_CAREER_LEVELS_BY_KEY = {level.value.lower(): level for level in CareerLevel}
_EMPLOYMENT_TYPES_BY_KEY = {kind.value.lower(): kind for kind in EmploymentType}
_SALARY_UNITS_BY_KEY = {unit.value: unit for unit in SalaryUnit}
_WORKPLACE_TYPES = {
    WorkplaceType.ON_SITE.value: WorkplaceType.ON_SITE,
    WorkplaceType.HYBRID.value: WorkplaceType.HYBRID,
    WorkplaceType.REMOTE.value: WorkplaceType.REMOTE,
}
_REMOTE_REGIONS = {region.value: region for region in RemoteRegion}


def normalize_career_level(value: Any) -> List[CareerLevel]:
    """Normalize career level(s) to a non-empty list of CareerLevel.

    Display values like "Entry Level" have their whitespace removed before
    matching ("EntryLevel"). Unknown entries and duplicates are dropped; if
    nothing is left the result is [NotSpecified].
    """
    if not value:
        return [CareerLevel.NOT_SPECIFIED]

    items = value if isinstance(value, (list, tuple)) else [value]

    levels: List[CareerLevel] = []
    for item in items:
        if not isinstance(item, str):
            continue
        key = _WHITESPACE.sub("", item).lower()
        level = _CAREER_LEVELS_BY_KEY.get(key)
        if level is not None and level not in levels:
            levels.append(level)

    return levels or [CareerLevel.NOT_SPECIFIED]


def normalize_workplace_type(value: Any) -> WorkplaceType:
    """Pass through On-site, Hybrid or Remote; anything else is Not specified."""
    if isinstance(value, str) and value in _WORKPLACE_TYPES:
        return _WORKPLACE_TYPES[value]
    return WorkplaceType.NOT_SPECIFIED


def normalize_remote_region(value: Any) -> Optional[RemoteRegion]:
    """Return the remote region on an exact match, otherwise None."""
    if isinstance(value, str):
        return _REMOTE_REGIONS.get(value)
    return None


def _language_code_for(item: str) -> Optional[str]:
    match = _LANGUAGE_CODE_SUFFIX.match(item)
    if match:
        extracted = match.group(1).lower()
        if extracted in LANGUAGE_CODES:
            return extracted

    if len(item) == 2 and item.lower() in LANGUAGE_CODES:
        return item.lower()

    return get_language_code_by_name(item)


def normalize_languages(value: Any) -> List[str]:
    """Normalize a list of language entries to supported 2-letter codes.

    Each entry may be "Name (xx)", a bare code, or a language name. Entries
    that cannot be resolved are dropped.
    """
    if not value or not isinstance(value, (list, tuple)):
        return []

    codes: List[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        code = _language_code_for(item)
        if code is not None and code not in codes:
            codes.append(code)
    return codes


def normalize_currency(value: Any) -> str:
    """Normalize a currency value to a supported code, defaulting to USD.

    Accepts "USD (United States Dollar)", "usd", or "United States Dollar".
    """
    if not value or not isinstance(value, str):
        return DEFAULT_CURRENCY

    match = _CURRENCY_CODE_PREFIX.match(value)
    if match:
        extracted = match.group(1).upper()
        if extracted in CURRENCY_CODES:
            return extracted

    upper = value.upper()
    if upper in CURRENCY_CODES:
        return upper

    currency = get_currency_by_name(value)
    if currency is not None:
        return currency.code

    return DEFAULT_CURRENCY


def normalize_visa_sponsorship(value: Any) -> VisaSponsorship:
    """Map case-insensitive "yes"/"no" to Yes/No; everything else is Not specified."""
    if not value or not isinstance(value, str):
        return VisaSponsorship.NOT_SPECIFIED

    normalized = value.strip().lower()
    if normalized == "yes":
        return VisaSponsorship.YES
    if normalized == "no":
        return VisaSponsorship.NO
    return VisaSponsorship.NOT_SPECIFIED


def _normalize_bounded_text(value: Any, max_length: int) -> Optional[str]:
    if not value:
        return None

    text = str(value).strip()
    if not text:
        return None

    if len(text) > max_length:
        return text[:max_length].strip()
    return text


def normalize_benefits(value: Any) -> Optional[str]:
    """Trim benefits text and cap it at 1000 characters."""
    return _normalize_bounded_text(value, MAX_BENEFITS_LENGTH)


def normalize_application_requirements(value: Any) -> Optional[str]:
    """Trim application requirements and cap them at 1000 characters."""
    return _normalize_bounded_text(value, MAX_REQUIREMENTS_LENGTH)


def normalize_employment_type(value: Any) -> Optional[EmploymentType]:
    """Match an employment type case-insensitively, or None."""
    if not isinstance(value, str):
        return None
    return _EMPLOYMENT_TYPES_BY_KEY.get(value.strip().lower())


def normalize_salary_unit(value: Any) -> SalaryUnit:
    """Match a salary unit case-insensitively, defaulting to year."""
    if isinstance(value, str):
        unit = _SALARY_UNITS_BY_KEY.get(value.strip().lower())
        if unit is not None:
            return unit
    return SalaryUnit.YEAR


def normalize_salary_amount(value: Any) -> Optional[float]:
    """Coerce a salary bound to a positive float, or None."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        cleaned = value.strip().replace(",", "")
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return None

    if math.isnan(number) or math.isinf(number) or number <= 0:
        return None
    return number


def normalize_salary(
    min_value: Any, max_value: Any, currency: Any, unit: Any
) -> Optional[Salary]:
    """Build a Salary when at least one bound is a positive number."""
    salary_min = normalize_salary_amount(min_value)
    salary_max = normalize_salary_amount(max_value)
    if salary_min is None and salary_max is None:
        return None

    return Salary(
        min=salary_min,
        max=salary_max,
        currency=normalize_currency(currency),
        unit=normalize_salary_unit(unit),
    )


def normalize_status(value: Any) -> JobStatus:
    """Only the literal "active" counts as active."""
    if isinstance(value, str) and value.strip().lower() == JobStatus.ACTIVE.value:
        return JobStatus.ACTIVE
    return JobStatus.INACTIVE


def normalize_featured(value: Any) -> bool:
    """Truthiness of the raw value."""
    return bool(value)


def normalize_optional_text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for empty values."""
    if value is None or value is False:
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(item) for item in value if item)
    text = str(value).strip()
    return text or None


def normalize_text(value: Any) -> str:
    """Like normalize_optional_text, but returns an empty string for empty values."""
    return normalize_optional_text(value) or ""
