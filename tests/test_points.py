"""
Tests for the tiered reward points calculation.
"""

from decimal import Decimal

import pytest

from rewards_engine.points import calculate_points, to_decimal


class TestFirstTier:
    """Amounts of 50 or less earn nothing."""

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-20"), Decimal("40"), Decimal("50")])
    def test_at_or_below_fifty_earns_zero(self, amount):
        assert calculate_points(amount) == 0

    def test_zero_and_negative_float_amounts(self):
        """Zero and negative amounts are valid input and earn no points."""
        assert calculate_points(0.0) == 0
        assert calculate_points(-20.0) == 0
        assert calculate_points(-1000) == 0

    def test_just_above_fifty_truncates_to_zero(self):
        assert calculate_points(Decimal("50.99")) == 0


class TestSecondTier:
    """Amounts over 50 up to 100 earn a point per dollar over 50."""

    def test_seventy_five(self):
        assert calculate_points(Decimal("75")) == 25

    def test_exactly_one_hundred(self):
        assert calculate_points(Decimal("100")) == 50
        assert calculate_points(100.0) == 50

    def test_fractional_amount_is_truncated(self):
        assert calculate_points(Decimal("75.99")) == 25


class TestThirdTier:
    """Amounts over 100 earn 50 points plus 2 per dollar over 100."""

    def test_one_twenty(self):
        assert calculate_points(120.0) == 90

    def test_one_fifty(self):
        assert calculate_points(Decimal("150")) == 150

    def test_very_large_amount(self):
        assert calculate_points(1000) == 1850

    def test_fractional_amount_is_truncated_after_doubling(self):
        # 50 + 0.75 * 2 = 51.5
        assert calculate_points(Decimal("100.75")) == 51

    def test_float_amount_uses_decimal_value(self):
        # 100.1 is not exact in binary; 50 + 0.1 * 2 must still be 50
        assert calculate_points(100.1) == 50


class TestProperties:
    def test_monotonic_non_decreasing(self):
        amounts = [Decimal(cents) / 100 for cents in range(-5000, 30001, 37)]
        points = [calculate_points(amount) for amount in amounts]
        assert points == sorted(points)

    def test_never_negative(self):
        for amount in (Decimal("-99999.99"), Decimal("-0.01"), Decimal("0"), Decimal("49.99")):
            assert calculate_points(amount) >= 0

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), float("inf")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValueError):
            calculate_points(amount)

    def test_to_decimal_accepts_strings_and_ints(self):
        assert to_decimal("120.50") == Decimal("120.50")
        assert to_decimal(7) == Decimal("7")
