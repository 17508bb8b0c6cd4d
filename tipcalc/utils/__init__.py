"""
Tip Calculator Utils Package
Parsing, formatting, labels and request identifiers.
"""

from tipcalc.utils.parsing import (
    parse_number,
    parse_optional_number,
    parse_flag,
)

from tipcalc.utils.currency import (
    parse_locale,
    resolve_locale,
    currency_for_locale,
    is_known_currency,
    format_currency,
)

from tipcalc.utils.labels import (
    get_label,
    get_labels,
)

from tipcalc.utils.ids import generate_request_id

__all__ = [
    # Parsing
    'parse_number',
    'parse_optional_number',
    'parse_flag',
    # Currency
    'parse_locale',
    'resolve_locale',
    'currency_for_locale',
    'is_known_currency',
    'format_currency',
    # Labels
    'get_label',
    'get_labels',
    # Identifiers
    'generate_request_id',
]
