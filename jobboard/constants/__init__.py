"""Fixed lookup tables: currencies, languages, career levels, job types."""

from .career_levels import CAREER_LEVEL_DISPLAY_NAMES
from .currencies import (
    CURRENCIES,
    CURRENCY_CODES,
    CURRENCY_RATES,
    Currency,
    format_currency_symbol,
    get_currency_by_name,
)
from .job_types import JOB_TYPE_DESCRIPTIONS, JOB_TYPE_DISPLAY_NAMES
from .languages import (
    LANGUAGE_CODES,
    LANGUAGES,
    get_display_name_from_code,
    get_language_code_by_name,
)

__all__ = [
    "CAREER_LEVEL_DISPLAY_NAMES",
    "CURRENCIES",
    "CURRENCY_CODES",
    "CURRENCY_RATES",
    "Currency",
    "format_currency_symbol",
    "get_currency_by_name",
    "JOB_TYPE_DESCRIPTIONS",
    "JOB_TYPE_DISPLAY_NAMES",
    "LANGUAGE_CODES",
    "LANGUAGES",
    "get_display_name_from_code",
    "get_language_code_by_name",
]
