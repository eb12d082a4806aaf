"""Salary formatting and annual-USD normalization.

This module turns a Salary value object into:
- a display string ("$120k-160k/year")
- an approximate USD display string for non-USD salaries ("≈ $130k/year")
- an annual USD number used only for sorting and bucketing
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from jobboard.constants.currencies import CURRENCY_RATES, format_currency_symbol
from jobboard.domain.models import Salary, SalaryUnit

NOT_SPECIFIED = "Not specified"

# Sentinel for "no salary" in normalize_annual_salary
UNRANKED = -1

K_THRESHOLD = 10_000
M_THRESHOLD = 1_000_000

ANNUAL_MULTIPLIERS: Dict[SalaryUnit, int] = {
    SalaryUnit.HOUR: 2080,  # 40 hours/week * 52 weeks
    SalaryUnit.DAY: 260,  # 5 days/week * 52 weeks
    SalaryUnit.WEEK: 52,
    SalaryUnit.MONTH: 12,
    SalaryUnit.YEAR: 1,
    SalaryUnit.PROJECT: 1,
}

UNIT_SUFFIXES: Dict[SalaryUnit, str] = {
    SalaryUnit.HOUR: "/hour",
    SalaryUnit.DAY: "/day",
    SalaryUnit.WEEK: "/week",
    SalaryUnit.MONTH: "/month",
    SalaryUnit.YEAR: "/year",
    SalaryUnit.PROJECT: "/project",
}


def _has_amount(salary: Optional[Salary]) -> bool:
    return bool(salary and (salary.min or salary.max))


def _round_half_up(value: Decimal, places: str) -> Decimal:
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)


def _format_millions(num: float) -> str:
    text = str(_round_half_up(Decimal(str(num)) / Decimal(1_000_000), "0.1"))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}M"


def _format_thousands(num: float) -> str:
    return f"{_round_half_up(Decimal(str(num)) / Decimal(1000), '1')}k"


def _format_plain(num: float) -> str:
    """Format with thousands separators and at most three decimals."""
    value = _round_half_up(Decimal(str(num)), "0.001")
    if value == value.to_integral_value():
        return f"{int(value):,}"
    return format(value.normalize(), ",f")


def _format_number(num: Optional[float], force_scale: Optional[str] = None) -> str:
    if not num:
        return ""

    if force_scale == "M":
        return _format_millions(num)
    if force_scale == "k":
        return _format_thousands(num)

    if num >= M_THRESHOLD:
        return _format_millions(num)
    if num >= K_THRESHOLD:
        return _format_thousands(num)
    return _format_plain(num)


def _shared_scale(salary_min: float, salary_max: float) -> Optional[str]:
    largest = max(salary_min, salary_max)
    if largest >= M_THRESHOLD:
        return "M"
    if largest >= K_THRESHOLD:
        return "k"
    return None


def format_salary(salary: Optional[Salary], show_currency_code: bool = False) -> str:
    """Format a salary for display.

    Both bounds of a range share the scale required by the larger bound, so
    a range never mixes "k" and "M". A range whose bounds are equal renders
    as one number with thousands separators.

    Args:
        salary: Salary to format (None allowed)
        show_currency_code: Append " (CODE)" after the unit

    Returns:
        Display string, or "Not specified" when there is no amount

    Example:
        >>> format_salary(Salary(min=1_200_000, max=1_800_000, currency="USD", unit="year"))
        '$1.2M-1.8M/year'
    """
    if not _has_amount(salary):
        return NOT_SPECIFIED

    symbol = format_currency_symbol(salary.currency)

    if salary.min and salary.max:
        if salary.min == salary.max:
            amount = _format_plain(salary.min)
        else:
            scale = _shared_scale(salary.min, salary.max)
            amount = f"{_format_number(salary.min, scale)}-{_format_number(salary.max, scale)}"
    else:
        amount = _format_number(salary.min or salary.max)

    unit_suffix = UNIT_SUFFIXES[SalaryUnit(salary.unit)]
    currency_code = f" ({salary.currency})" if show_currency_code else ""

    return f"{symbol}{amount}{unit_suffix}{currency_code}"


def format_usd_approximation(salary: Optional[Salary]) -> Optional[str]:
    """Format the approximate USD equivalent of a non-USD salary.

    Returns:
        "≈ $..." string, or None when there is no amount or the salary is
        already in USD
    """
    if not _has_amount(salary) or salary.currency == "USD":
        return None

    rate = CURRENCY_RATES.get(salary.currency, 1.0)
    usd_salary = Salary(
        min=salary.min * rate if salary.min else None,
        max=salary.max * rate if salary.max else None,
        currency="USD",
        unit=salary.unit,
    )
    return f"≈ {format_salary(usd_salary, False)}"


def normalize_annual_salary(salary: Optional[Salary]) -> float:
    """Convert a salary to an annual USD value for comparison.

    Uses the upper bound when present, otherwise the lower bound. Returns
    -1 when there is no amount so unranked jobs can be told apart.

    Example:
        >>> normalize_annual_salary(Salary(min=60, currency="USD", unit="hour"))
        124800.0
    """
    if not _has_amount(salary):
        return UNRANKED

    rate = CURRENCY_RATES.get(salary.currency, 1.0)
    multiplier = ANNUAL_MULTIPLIERS[SalaryUnit(salary.unit)]
    value = salary.max or salary.min or 0

    return float(value * rate * multiplier)
