"""
Tip Calculator Service
Pure tip and total arithmetic.

The tip rule is isolated from the total so it can be checked on its own;
callers compute the total with the same amount they passed in.
"""

from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_CEILING, localcontext
from typing import Optional

HUNDRED = Decimal('100')
ZERO = Decimal('0')

# Digits beyond the span of the operands; covers the /100 shift and carries
BASE_PRECISION = 28


@dataclass(frozen=True)
class TipBreakdown:
    amount: Decimal
    tip: Decimal
    total: Decimal
    used_override: bool
    rounded: bool


def _exact_context(*values: Optional[Decimal]) -> Context:
    """
    Context wide enough that products and sums of values are exact.

    Width runs from the highest digit to the lowest across all values
    (units place included); a product at most doubles it.
    """
    present = [v for v in values if v is not None]
    highest = max([v.adjusted() for v in present] + [0])
    lowest = min([v.as_tuple().exponent for v in present] + [0])
    return Context(prec=2 * (highest - lowest + 1) + BASE_PRECISION)


def compute_tip(
    amount: Decimal,
    tip_percent: Decimal,
    custom_tip_override: Optional[Decimal] = None,
    round_up: bool = False
) -> Decimal:
    """
    Compute the tip owed on a bill.

    An override replaces the percentage formula entirely. The raw tip is
    clamped at zero, then ceilinged to a whole currency unit when
    round_up is set. Overrides have no upper bound.

    Args:
        amount: Bill amount
        tip_percent: Tip rate in percent (20 means 20%)
        custom_tip_override: Absolute tip, or None to use the percentage
        round_up: Round the tip up to the next whole unit

    Returns:
        Non-negative tip
    """
    with localcontext(_exact_context(amount, tip_percent, custom_tip_override)):
        if custom_tip_override is not None:
            raw_tip = custom_tip_override
        else:
            raw_tip = tip_percent / HUNDRED * amount

        tip = raw_tip if raw_tip > ZERO else ZERO
        if round_up:
            tip = tip.to_integral_value(rounding=ROUND_CEILING)
    return tip


def compute_total(amount: Decimal, tip: Decimal) -> Decimal:
    """Total owed: bill amount plus tip, without rounding."""
    with localcontext(_exact_context(amount, tip)):
        return amount + tip


def calculate(
    amount: Decimal,
    tip_percent: Decimal,
    custom_tip_override: Optional[Decimal] = None,
    round_up: bool = False
) -> TipBreakdown:
    """Compute tip and total together."""
    tip = compute_tip(amount, tip_percent, custom_tip_override, round_up)
    return TipBreakdown(
        amount=amount,
        tip=tip,
        total=compute_total(amount, tip),
        used_override=custom_tip_override is not None,
        rounded=round_up,
    )
