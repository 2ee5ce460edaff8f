"""
Exposure Calculator Test Module

Verifies the base exposure formula against the worked example and its
clamping, monotonicity and determinism properties.
"""

import pytest

from revenue_leak.services.exposure import compute_exposure, compute_full_exposure


class TestWorkedExample:
    """(80 inquiries/week, 3 of 10 missed, $4,500 ticket, 35% close)."""

    def test_conservative_exposure(self):
        """Conservative exposure matches the hand-computed figures."""
        result = compute_exposure(80, 3, 4500, 0.35)

        assert result.missedRate == pytest.approx(0.3)
        assert result.missedWeekly == 24.0
        assert result.missedMonthly == 96.0
        assert result.monthly == 151200
        assert result.daily == 5040
        assert result.yearly == 1814400

    def test_full_exposure(self):
        """Full exposure assumes every missed call would have closed."""
        result = compute_full_exposure(80, 3, 4500)

        assert result.monthly == 432000
        assert result.daily == 14400
        assert result.yearly == 5184000

    def test_full_never_below_conservative(self):
        """Close rate 1.0 is an upper bound on any user close rate."""
        assert compute_full_exposure(80, 3, 4500).monthly >= compute_exposure(80, 3, 4500, 0.35).monthly


class TestClamping:
    """Out-of-range inputs are clamped, never rejected."""

    def test_clamped_inputs_equal_their_bounds(self):
        """Negatives floor at 0, missedPer10 caps at 10, closeRate caps at 1."""
        assert compute_exposure(-5, 15, -100, 2.0) == compute_exposure(0, 10, 0, 1.0)
        assert compute_exposure(80, 15, 4500, 2.0) == compute_exposure(80, 10, 4500, 1.0)

    def test_over_cap_values(self):
        """Every inquiry missed at a 100% close rate."""
        result = compute_exposure(80, 15, 4500, 2.0)
        assert result.missedWeekly == 80.0
        assert result.monthly == 1440000

    @pytest.mark.parametrize("bad", [None, float("nan"), float("-inf")])
    def test_non_numeric_inputs_yield_zero(self, bad):
        """Missing or NaN core inputs produce an all-zero result."""
        result = compute_exposure(bad, 3, 4500, 0.35)
        assert result.monthly == 0
        assert result.daily == 0
        assert result.yearly == 0

    def test_all_zero_input(self):
        """All-zero input yields all-zero output."""
        result = compute_exposure(0, 0, 0, 0)
        assert result.missedWeekly == 0
        assert result.missedMonthly == 0
        assert result.monthly == 0


class TestProperties:
    """Monotonicity and determinism."""

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ((40, 3, 4500, 0.35), (80, 3, 4500, 0.35)),
            ((80, 2, 4500, 0.35), (80, 5, 4500, 0.35)),
            ((80, 3, 1000, 0.35), (80, 3, 4500, 0.35)),
            ((80, 3, 4500, 0.10), (80, 3, 4500, 0.35)),
        ],
    )
    def test_monotone_in_each_input(self, lower, higher):
        """Raising any one input never lowers monthly exposure."""
        assert compute_exposure(*higher).monthly >= compute_exposure(*lower).monthly

    def test_deterministic(self):
        """Identical input gives an identical result."""
        assert compute_exposure(37, 4, 899.99, 0.27) == compute_exposure(37, 4, 899.99, 0.27)

    def test_daily_and_yearly_derive_from_monthly(self):
        """daily = round(monthly / 30) and yearly = monthly x 12."""
        result = compute_exposure(37, 4, 899.99, 0.27)
        assert result.yearly == result.monthly * 12
        assert abs(result.daily - result.monthly / 30) <= 0.5
