"""
Tip Calculator Screen Service
State and rendering for the single tip screen.

The screen owns four values: three raw text fields and the round-up
toggle. Every render re-parses them, recomputes the tip and total, and
formats both for display. There are no error or loading states.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional
import structlog

from tipcalc.config import get_config
from tipcalc.services.calculator import TipBreakdown, calculate
from tipcalc.utils import (
    currency_for_locale,
    format_currency,
    get_label,
    get_labels,
    parse_flag,
    parse_number,
    parse_optional_number,
    resolve_locale,
)

logger = structlog.get_logger(__name__)

ZERO = Decimal('0')

# Request field names
FIELD_AMOUNT = 'amount'
FIELD_TIP_PERCENT = 'tip_percent'
FIELD_CUSTOM_TIP = 'custom_tip'
FIELD_ROUND_UP = 'round_up'


@dataclass
class TipScreenState:
    amount_input: str = ''
    tip_percent_input: str = ''
    custom_tip_input: str = ''
    round_up: bool = False

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> 'TipScreenState':
        """Build state from submitted form, query or JSON fields."""
        state = cls()
        state.set_amount_input(fields.get(FIELD_AMOUNT))
        state.set_tip_percent_input(fields.get(FIELD_TIP_PERCENT))
        state.set_custom_tip_input(fields.get(FIELD_CUSTOM_TIP))
        state.set_round_up(parse_flag(fields.get(FIELD_ROUND_UP)))
        return state

    def set_amount_input(self, text: Optional[Any]) -> None:
        self.amount_input = _as_text(text)

    def set_tip_percent_input(self, text: Optional[Any]) -> None:
        self.tip_percent_input = _as_text(text)

    def set_custom_tip_input(self, text: Optional[Any]) -> None:
        self.custom_tip_input = _as_text(text)

    def set_round_up(self, round_up: bool) -> None:
        self.round_up = bool(round_up)


@dataclass(frozen=True)
class TipScreenView:
    state: TipScreenState
    breakdown: TipBreakdown
    locale: str
    currency: str
    tip_display: str
    total_display: str
    labels: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'inputs': {
                FIELD_AMOUNT: self.state.amount_input,
                FIELD_TIP_PERCENT: self.state.tip_percent_input,
                FIELD_CUSTOM_TIP: self.state.custom_tip_input,
                FIELD_ROUND_UP: self.state.round_up,
            },
            'tip': str(self.breakdown.tip),
            'total': str(self.breakdown.total),
            'tip_display': self.tip_display,
            'total_display': self.total_display,
            'used_override': self.breakdown.used_override,
            'rounded': self.breakdown.rounded,
            'locale': self.locale,
            'currency': self.currency,
            'labels': self.labels,
        }


def _as_text(value: Optional[Any]) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        # JSON true/false is not a number
        return ''
    return str(value)


def render(
    state: TipScreenState,
    locale: Optional[str] = None,
    currency: Optional[str] = None
) -> TipScreenView:
    """
    Recompute and format the tip screen for the given state.

    Blank or malformed bill text counts as 0 and blank or malformed tip
    percent text as the configured default (20). The custom tip has no
    default: it only applies when it parses.
    """
    calculator_config = get_config().calculator
    locale = resolve_locale(locale, calculator_config.effective_locale)
    currency = (currency or calculator_config.currency or currency_for_locale(locale)).upper()

    amount = parse_number(state.amount_input, ZERO)
    tip_percent = parse_number(state.tip_percent_input, calculator_config.default_tip_percent)
    custom_tip = parse_optional_number(state.custom_tip_input)

    breakdown = calculate(amount, tip_percent, custom_tip, state.round_up)

    tip_display = format_currency(breakdown.tip, locale, currency)
    total_display = format_currency(breakdown.total, locale, currency)

    labels = get_labels(locale)
    labels['tip_amount'] = get_label('tip_amount', locale, amount=tip_display)
    labels['total_amount'] = get_label('total_amount', locale, amount=total_display)

    logger.debug(
        "Tip screen rendered",
        amount=str(amount),
        tip_percent=str(tip_percent),
        used_override=breakdown.used_override,
        round_up=state.round_up,
        tip=str(breakdown.tip),
        total=str(breakdown.total),
    )

    return TipScreenView(
        state=state,
        breakdown=breakdown,
        locale=locale,
        currency=currency,
        tip_display=tip_display,
        total_display=total_display,
        labels=labels,
    )
