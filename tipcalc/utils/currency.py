"""
Tip Calculator Currency Utilities
Locale-aware money formatting backed by Babel.
"""

from decimal import Decimal
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import get_territory_currencies, is_currency
import structlog

logger = structlog.get_logger(__name__)

FALLBACK_CURRENCY = 'USD'
FALLBACK_LOCALE = 'en_US'


def parse_locale(tag: str) -> Locale:
    """
    Parse a locale tag in either en_US or en-US form.

    Raises:
        ValueError: tag is empty or not a known locale
    """
    if not tag:
        raise ValueError("Locale tag is empty")
    try:
        return Locale.parse(tag.strip().replace('-', '_'))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unknown locale: {tag}") from e


def resolve_locale(tag: Optional[str], fallback: str) -> str:
    """Return the normalized tag, or fallback if tag is missing or unknown."""
    if not tag:
        return fallback
    try:
        return str(parse_locale(tag))
    except ValueError:
        logger.warning("Unknown locale requested", locale=tag, fallback=fallback)
        return fallback


def currency_for_locale(locale: str) -> str:
    """Current currency of the locale's territory."""
    territory = parse_locale(locale).territory
    if not territory:
        return FALLBACK_CURRENCY
    currencies = get_territory_currencies(territory)
    return currencies[0] if currencies else FALLBACK_CURRENCY


def is_known_currency(code: Optional[str]) -> bool:
    """Check an ISO 4217 code against Babel's currency data."""
    return bool(code) and is_currency(code.upper())


def format_currency(
    value: Decimal,
    locale: str,
    currency: Optional[str] = None
) -> str:
    """
    Format value as money for display.

    Symbol, grouping and decimal places follow the locale; the currency
    defaults to the locale territory's currency.
    """
    code = (currency or currency_for_locale(locale)).upper()
    return babel_format_currency(value, code, locale=parse_locale(locale))
