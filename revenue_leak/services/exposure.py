"""
Exposure Calculator Service

The base formula converting inquiry volume, missed-call ratio, average ticket
and close rate into daily / monthly / yearly dollar loss. Used standalone by
the live cockpit and as the building block of the missed-calls leak.

Algorithm (fixed-point, no multipliers beyond the inputs):
    missedRate    = missedPer10 / 10
    missedWeekly  = round1(inquiriesWeekly x missedRate)
    missedMonthly = round1(missedWeekly x 4)
    monthly       = round(missedMonthly x avgTicket x closeRate)
    daily         = round(monthly / 30)
    yearly        = round(monthly x 12)

Worked example: (80, 3, 4500, 0.35) -> missedWeekly 24.0, missedMonthly 96.0,
monthly 151200, daily 5040, yearly 1814400.
"""

from typing import Any

from revenue_leak.models.schemas import ExposureResult
from revenue_leak.services.constants import DAYS_PER_MONTH, MONTHS_PER_YEAR, WEEKS_PER_MONTH
from revenue_leak.services.normalizer import clamp, per10_to_rate, round_calls, round_money


# Close rate used for the uncapped "full exposure" variant
FULL_EXPOSURE_CLOSE_RATE: float = 1.0


def compute_exposure(
    inquiries_weekly: Any,
    missed_per_10: Any,
    avg_ticket: Any,
    close_rate: Any,
) -> ExposureResult:
    """
    Compute revenue exposure from missed inbound calls.

    Inputs are clamped first: negative or missing values become 0,
    missed_per_10 is capped at 10 and close_rate at 1.0. Never raises.

    Args:
        inquiries_weekly: Inbound inquiries per week
        missed_per_10: Missed calls out of every 10 (0-10)
        avg_ticket: Average ticket in dollars
        close_rate: Close rate as a 0.0-1.0 fraction

    Returns:
        ExposureResult with call counts rounded to 0.1 and dollars to whole units
    """
    inquiries = clamp(inquiries_weekly)
    missed_rate = per10_to_rate(missed_per_10)
    ticket = clamp(avg_ticket)
    rate = clamp(close_rate, 0, 1)

    missed_weekly = round_calls(inquiries * missed_rate)
    missed_monthly = round_calls(missed_weekly * WEEKS_PER_MONTH)

    monthly = round_money(missed_monthly * ticket * rate)
    daily = round_money(monthly / DAYS_PER_MONTH)
    yearly = round_money(monthly * MONTHS_PER_YEAR)

    return ExposureResult(
        missedRate=missed_rate,
        missedWeekly=missed_weekly,
        missedMonthly=missed_monthly,
        daily=daily,
        monthly=monthly,
        yearly=yearly,
    )


def compute_full_exposure(inquiries_weekly: Any, missed_per_10: Any, avg_ticket: Any) -> ExposureResult:
    """Exposure with every missed call assumed to have closed (close rate 1.0)."""
    return compute_exposure(inquiries_weekly, missed_per_10, avg_ticket, FULL_EXPOSURE_CLOSE_RATE)
