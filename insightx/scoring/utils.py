"""
Decimal Utilities
insightx/scoring/utils.py

Precision-safe decimal math for the scoring calculators. Rounding is half
up, so x.5 always rounds away from zero for the non-negative scores used
here (Python's round() would round half to even).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves rounded up."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def mean(values: Iterable[Decimal]) -> Decimal:
    """
    Arithmetic mean.

    Raises ValueError on an empty input; callers guard against empty groups
    by construction.
    """
    values = list(values)
    if not values:
        raise ValueError("mean() of an empty sequence")
    return sum(values, Decimal("0")) / Decimal(len(values))


def to_score(value: Decimal) -> int:
    """Clamp to [0, 100] and round half up to an integer score."""
    return round_half_up(clamp(value))
