"""
Tiered reward points calculation.

Tiers:
- amount <= 50:        0 points
- 50 < amount <= 100:  1 point per dollar over 50
- amount > 100:        50 points plus 2 points per dollar over 100

Results are truncated to whole points after the tier arithmetic.
"""

from decimal import Decimal
from typing import Union

FIRST_TIER_THRESHOLD = Decimal("50")
SECOND_TIER_THRESHOLD = Decimal("100")
FIRST_TIER_MAX_POINTS = SECOND_TIER_THRESHOLD - FIRST_TIER_THRESHOLD
SECOND_TIER_MULTIPLIER = Decimal("2")

Amount = Union[Decimal, float, int, str]


def to_decimal(amount: Amount) -> Decimal:
    """
    Normalise an amount to Decimal.

    Floats go through their string form so 120.0 becomes Decimal("120.0")
    rather than its binary expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def calculate_points(amount: Amount) -> int:
    """
    Convert a transaction amount into reward points.

    Args:
        amount: transaction amount (zero and negative amounts earn nothing)

    Returns:
        Non-negative integer points

    Raises:
        ValueError: if the amount is NaN or infinite

    Example:
        >>> calculate_points(Decimal("120"))
        90
        >>> calculate_points(1000)
        1850
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number. Got: {amount}")

    if value <= FIRST_TIER_THRESHOLD:
        return 0
    if value <= SECOND_TIER_THRESHOLD:
        return int(value - FIRST_TIER_THRESHOLD)
    return int(FIRST_TIER_MAX_POINTS + (value - SECOND_TIER_THRESHOLD) * SECOND_TIER_MULTIPLIER)
