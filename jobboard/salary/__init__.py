"""Salary display formatting and annual USD normalization."""

from .engine import (
    ANNUAL_MULTIPLIERS,
    NOT_SPECIFIED,
    UNRANKED,
    format_salary,
    format_usd_approximation,
    normalize_annual_salary,
)

__all__ = [
    "format_salary",
    "format_usd_approximation",
    "normalize_annual_salary",
    "ANNUAL_MULTIPLIERS",
    "NOT_SPECIFIED",
    "UNRANKED",
]
