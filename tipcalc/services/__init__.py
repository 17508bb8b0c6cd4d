"""
Tip Calculator Services Package
Tip arithmetic and the tip screen built on it.
"""

from tipcalc.services.calculator import (
    TipBreakdown,
    compute_tip,
    compute_total,
    calculate,
)

from tipcalc.services.shell import (
    TipScreenState,
    TipScreenView,
    render,
)

__all__ = [
    # Calculator
    'TipBreakdown',
    'compute_tip',
    'compute_total',
    'calculate',
    # Screen
    'TipScreenState',
    'TipScreenView',
    'render',
]
