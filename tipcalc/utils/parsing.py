"""
Tip Calculator Input Parsing
Tolerant conversion of raw field text into Decimal values.

User input is never rejected: text that is not a plain decimal literal
becomes the caller's default (or None for fields without one).
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Sign, digits with optional fraction (5, 5., .5, 5.25), optional exponent.
_NUMBER_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$', re.ASCII)

# Literals outside these magnitudes are treated as unparseable. Values
# below 1e11 keep tip and total within 28 digits once quantized to cents.
MAX_ADJUSTED_EXPONENT = 10
MIN_ADJUSTED_EXPONENT = -100

_TRUE_VALUES = frozenset({'1', 'true', 'on', 'yes'})


def parse_optional_number(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse decimal text, returning None when it is absent or malformed.

    "0" parses to Decimal('0'); only unparseable text yields None.
    """
    if text is None:
        return None
    candidate = str(text).strip()
    if not _NUMBER_RE.fullmatch(candidate):
        return None
    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return None
    if value and not MIN_ADJUSTED_EXPONENT <= value.adjusted() <= MAX_ADJUSTED_EXPONENT:
        return None
    return value


def parse_number(text: Optional[str], default: Decimal) -> Decimal:
    """Parse decimal text, substituting default for unparseable input."""
    value = parse_optional_number(text)
    return default if value is None else value


def parse_flag(value: Any) -> bool:
    """Interpret a checkbox or JSON boolean field."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES
