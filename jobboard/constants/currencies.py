"""Supported currencies, display symbols, and fixed USD conversion rates.

Rates are approximate USD values of one unit of each currency. They are used
for salary comparison and the "≈ USD" hint only, never for anything that
needs to be exact.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Currency:
    """A supported currency."""

    code: str
    name: str
    symbol: str


CURRENCIES: Dict[str, Currency] = {
    "USD": Currency("USD", "United States Dollar", "$"),
    "EUR": Currency("EUR", "Euro", "€"),
    "GBP": Currency("GBP", "British Pound", "£"),
    "JPY": Currency("JPY", "Japanese Yen", "¥"),
    "CAD": Currency("CAD", "Canadian Dollar", "C$"),
    "AUD": Currency("AUD", "Australian Dollar", "A$"),
    "CHF": Currency("CHF", "Swiss Franc", "CHF "),
    "CNY": Currency("CNY", "Chinese Yuan", "CN¥"),
    "INR": Currency("INR", "Indian Rupee", "₹"),
    "NZD": Currency("NZD", "New Zealand Dollar", "NZ$"),
    "SGD": Currency("SGD", "Singapore Dollar", "S$"),
    "HKD": Currency("HKD", "Hong Kong Dollar", "HK$"),
    "SEK": Currency("SEK", "Swedish Krona", "kr "),
    "NOK": Currency("NOK", "Norwegian Krone", "kr "),
    "DKK": Currency("DKK", "Danish Krone", "kr "),
    "PLN": Currency("PLN", "Polish Złoty", "zł "),
    "BRL": Currency("BRL", "Brazilian Real", "R$"),
    "MXN": Currency("MXN", "Mexican Peso", "MX$"),
    "ZAR": Currency("ZAR", "South African Rand", "R "),
    "KRW": Currency("KRW", "South Korean Won", "₩"),
    "ILS": Currency("ILS", "Israeli New Shekel", "₪"),
    "AED": Currency("AED", "United Arab Emirates Dirham", "AED "),
    "TRY": Currency("TRY", "Turkish Lira", "₺"),
    "CZK": Currency("CZK", "Czech Koruna", "Kč "),
}

CURRENCY_CODES = frozenset(CURRENCIES)

# USD per one unit of currency
CURRENCY_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.08,
    "GBP": 1.27,
    "JPY": 0.0067,
    "CAD": 0.74,
    "AUD": 0.66,
    "CHF": 1.13,
    "CNY": 0.14,
    "INR": 0.012,
    "NZD": 0.61,
    "SGD": 0.74,
    "HKD": 0.13,
    "SEK": 0.095,
    "NOK": 0.094,
    "DKK": 0.145,
    "PLN": 0.25,
    "BRL": 0.2,
    "MXN": 0.058,
    "ZAR": 0.054,
    "KRW": 0.00075,
    "ILS": 0.27,
    "AED": 0.27,
    "TRY": 0.031,
    "CZK": 0.043,
}

_NAME_INDEX = {currency.name.lower(): currency for currency in CURRENCIES.values()}


def get_currency_by_name(name: str) -> Optional[Currency]:
    """Look up a currency by its display name (case-insensitive)."""
    if not isinstance(name, str):
        return None
    return _NAME_INDEX.get(name.strip().lower())


def format_currency_symbol(code: str) -> str:
    """Return the display symbol for a currency code.

    Unknown codes fall back to the code itself followed by a space.
    """
    currency = CURRENCIES.get(code)
    if currency is None:
        return f"{code} "
    return currency.symbol
