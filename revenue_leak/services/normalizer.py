"""
Input Normalizer Service

Clamps and defaults every raw numeric field to a safe, finite, non-negative
range before any computation. This is what lets the engine accept partially
typed form state without ever raising:

- None / NaN / +-inf / below-floor values become the field's floor
- above-ceiling values become the field's ceiling
- per-10 ratios (0-10) become 0.0-1.0 rates by dividing by 10
- percentages (0-100) become 0.0-1.0 rates by dividing by 100
- unknown bucket labels map to a documented fallback bucket

normalize_record() turns a BusinessInputRecord into a NormalizedInput, the
only shape the leak catalog and reactivation model read from.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Dict, Optional

from revenue_leak.models.schemas import BusinessInputRecord
from revenue_leak.services.constants import (
    CAMPAIGNS_PER_YEAR,
    DEFAULT_BUSINESS_HOURS_END,
    DEFAULT_BUSINESS_HOURS_START,
    DEFAULT_CLOSE_RATE,
    DEFAULT_CONSULTATION_MINUTES,
    DEFAULT_DATABASE_AGE,
    DEFAULT_TIME_SINCE_LAST_PURCHASE,
    DORMANT_VIABILITY_RATES,
    INDUSTRY_CLOSE_RATES,
    LOSS_RANGE_HIGH_FACTOR,
    LOSS_RANGE_LOW_FACTOR,
    MISSED_CALL_RATES,
    PAST_CUSTOMER_WINNABLE_SHARES,
    RESPONSE_TIME_PENALTIES,
    UNKNOWN_MISSED_CALL_RATE,
)


# Upper bound for unbounded counts and currency so arithmetic stays finite
MAX_FINITE_VALUE: float = 1e12

# Digits for half-up rounding; products of capped fields stay well inside this
ROUNDING_PRECISION: int = 60


# =============================================================================
# Scalar Helpers
# =============================================================================


def clamp(value: Any, minimum: float = 0.0, maximum: float = MAX_FINITE_VALUE) -> float:
    """
    Clamp a raw numeric value into [minimum, maximum].

    None, non-numeric values, NaN and anything below the floor (including
    -inf) return the floor. Never raises.

    Args:
        value: Raw value from the input record
        minimum: Field floor
        maximum: Field ceiling

    Returns:
        A finite float within bounds
    """
    if value is None or isinstance(value, bool):
        return float(minimum)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(minimum)
    if math.isnan(number) or number < minimum:
        return float(minimum)
    if number > maximum:
        return float(maximum)
    return number


def per10_to_rate(value: Any) -> float:
    """Convert an 'out of 10' ratio (0-10) to a 0.0-1.0 rate."""
    return clamp(value, 0, 10) / 10


def percent_to_rate(value: Any) -> float:
    """Convert a 0-100 percentage to a 0.0-1.0 rate."""
    return clamp(value, 0, 100) / 100


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero to the given number of decimal places.

    Python's built-in round() rounds half to even; money and call counts in
    this engine round half up (Math.round semantics for non-negative values).
    The value is routed through its shortest repr so 2.675 rounds to 2.68.
    """
    if value is None or not math.isfinite(value):
        return 0.0
    with localcontext() as ctx:
        ctx.prec = ROUNDING_PRECISION
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_money(value: float) -> int:
    """Round a dollar amount to the nearest whole dollar, capped at +-MAX_FINITE_VALUE."""
    return int(round_half_up(clamp(value, -MAX_FINITE_VALUE, MAX_FINITE_VALUE), 0))


def round_calls(value: float) -> float:
    """Round a call count to the nearest 0.1."""
    return round_half_up(value, 1)


def loss_range(monthly_loss: int) -> tuple:
    """
    Build the +-20% confidence band around a point estimate.

    Rounding the low bound down and the high bound up guarantees the band
    always contains the (already whole-dollar) point estimate.
    """
    low = math.floor(monthly_loss * LOSS_RANGE_LOW_FACTOR)
    high = math.ceil(monthly_loss * LOSS_RANGE_HIGH_FACTOR)
    return (min(low, monthly_loss), max(high, monthly_loss))


def get_industry_default_close_rate(industry: Optional[str]) -> float:
    """
    Return the industry's default close rate.

    Args:
        industry: Industry label from the form (may be None or unknown)

    Returns:
        Close rate as a 0.0-1.0 fraction (0.25 for unknown industries)
    """
    if not industry:
        return DEFAULT_CLOSE_RATE
    return INDUSTRY_CLOSE_RATES.get(industry.strip(), DEFAULT_CLOSE_RATE)


def _bucket(value: Optional[str], table: Dict[str, Any], default: str) -> str:
    """Return value if it is a known bucket label, otherwise the default label."""
    if value is not None and value.strip() in table:
        return value.strip()
    return default


# =============================================================================
# Normalized Record
# =============================================================================


@dataclass(frozen=True)
class NormalizedInput:
    """
    Clamped, defaulted view of a BusinessInputRecord.

    All rates are 0.0-1.0 fractions, all counts are monthly, all bucket
    fields are known labels.

    Attributes:
        industry: Industry label ("" if absent).
        monthly_leads: Total inquiries per month.
        monthly_calls: Inbound calls per month.
        close_rate: Deals closed / leads, or the industry default.
        close_rate_source: "observed" or "industry-default".
        avg_ticket: Average transaction value in dollars.
        customer_lifetime_value: Ticket times purchases per customer for repeat businesses.
        missed_call_rate: Share of inbound calls missed.
        missed_call_rate_bucket: Bucket label the rate came from ("unknown" if not supplied).
        response_time: Response time bucket label (None if not supplied).
        percent_followed_up: Share of leads receiving any follow-up.
        follow_up_attempts: Average follow-up attempts per lead.
        consultation_minutes: Consultation length in minutes.
        open_hours: Length of the business day in hours.
        open_saturday / open_sunday: Weekend opening flags.
        answers_after_hours / answers_weekends: Coverage flags.
        avg_hold_minutes: Average hold time in minutes.
        requires_appointments: Whether the business books appointments.
        appointments_booked / appointments_shown: Monthly appointment counts.
        sends_reminders / charges_no_show_fee: Appointment policies.
        hourly_labor_cost: Loaded hourly staff cost.
        qualifies_leads: Whether leads are screened before consultation.
        percent_unqualified: Share of leads that are poor fits.
        has_dormant_leads / total_dormant_leads / database_age: Dormant database.
        ever_recontacted_dormant / percent_recontacted_dormant: Dormant recontact history.
        has_past_customers / num_past_customers / time_since_last_purchase: Past customers.
        sends_reengagement_campaigns / reengagement_frequency: Win-back cadence.
    """
    industry: str
    monthly_leads: float
    monthly_calls: float
    close_rate: float
    close_rate_source: str
    avg_ticket: float
    customer_lifetime_value: float
    missed_call_rate: float
    missed_call_rate_bucket: str
    response_time: Optional[str]
    percent_followed_up: float
    follow_up_attempts: float
    consultation_minutes: float
    open_hours: float
    open_saturday: bool
    open_sunday: bool
    answers_after_hours: bool
    answers_weekends: bool
    avg_hold_minutes: float
    requires_appointments: bool
    appointments_booked: float
    appointments_shown: float
    sends_reminders: bool
    charges_no_show_fee: bool
    hourly_labor_cost: float
    qualifies_leads: bool
    percent_unqualified: float
    has_dormant_leads: bool
    total_dormant_leads: float
    database_age: str
    ever_recontacted_dormant: bool
    percent_recontacted_dormant: float
    has_past_customers: bool
    num_past_customers: float
    time_since_last_purchase: str
    sends_reengagement_campaigns: bool
    reengagement_frequency: Optional[str]


def normalize_record(record: BusinessInputRecord) -> NormalizedInput:
    """
    Normalize a raw wizard record for the calculation engine.

    Derivations:
    - monthly leads: totalMonthlyLeads, else the sum of the channel counts
    - close rate: closedDealsPerMonth / monthly leads clamped to [0, 1];
      industry default when either side is missing or zero
    - customer lifetime value: ticket x max(1, purchases) for repeat businesses
    - open hours: end - start, defaulting to a 9-17 day when unusable

    Args:
        record: BusinessInputRecord from the form layer

    Returns:
        NormalizedInput with every field safe for arithmetic
    """
    calls = clamp(record.inboundCalls)
    channel_total = calls + clamp(record.webFormSubmissions) + clamp(record.socialInquiries)
    monthly_leads = clamp(record.totalMonthlyLeads) or channel_total

    closed = clamp(record.closedDealsPerMonth)
    if monthly_leads > 0 and closed > 0:
        close_rate = clamp(closed / monthly_leads, 0, 1)
        close_rate_source = "observed"
    else:
        close_rate = get_industry_default_close_rate(record.industry)
        close_rate_source = "industry-default"

    avg_ticket = clamp(record.avgTransactionValue)
    if record.repeatCustomers:
        customer_lifetime_value = clamp(avg_ticket * max(1.0, clamp(record.avgPurchasesPerCustomer)))
    else:
        customer_lifetime_value = avg_ticket

    missed_bucket = _bucket(record.missedCallRate, MISSED_CALL_RATES, "unknown")
    missed_call_rate = MISSED_CALL_RATES.get(missed_bucket, UNKNOWN_MISSED_CALL_RATE)

    response_time = None
    if record.avgResponseTime is not None and record.avgResponseTime.strip() in RESPONSE_TIME_PENALTIES:
        response_time = record.avgResponseTime.strip()

    if record.followUpAllLeads:
        percent_followed_up = 1.0
    else:
        percent_followed_up = percent_to_rate(record.percentageFollowedUp)

    start = clamp(record.businessHoursStart, 0, 24) if record.businessHoursStart is not None else DEFAULT_BUSINESS_HOURS_START
    end = clamp(record.businessHoursEnd, 0, 24) if record.businessHoursEnd is not None else DEFAULT_BUSINESS_HOURS_END
    open_hours = end - start if end > start else DEFAULT_BUSINESS_HOURS_END - DEFAULT_BUSINESS_HOURS_START

    booked = clamp(record.appointmentsBooked)
    # Shown can never exceed booked
    shown = clamp(record.appointmentsShowUp, 0, booked)

    reengagement_frequency = None
    if record.reengagementFrequency is not None and record.reengagementFrequency.strip() in CAMPAIGNS_PER_YEAR:
        reengagement_frequency = record.reengagementFrequency.strip()

    return NormalizedInput(
        industry=(record.industry or "").strip(),
        monthly_leads=monthly_leads,
        monthly_calls=calls,
        close_rate=close_rate,
        close_rate_source=close_rate_source,
        avg_ticket=avg_ticket,
        customer_lifetime_value=customer_lifetime_value,
        missed_call_rate=missed_call_rate,
        missed_call_rate_bucket=missed_bucket,
        response_time=response_time,
        percent_followed_up=percent_followed_up,
        follow_up_attempts=clamp(record.avgFollowUpAttempts, 0, 100),
        consultation_minutes=clamp(record.consultationLength, 0, 24 * 60) or DEFAULT_CONSULTATION_MINUTES,
        open_hours=open_hours,
        open_saturday=bool(record.openSaturday),
        open_sunday=bool(record.openSunday),
        answers_after_hours=bool(record.answersAfterHours),
        answers_weekends=bool(record.answersWeekends),
        avg_hold_minutes=clamp(record.avgHoldTime, 0, 120),
        requires_appointments=bool(record.requiresAppointments),
        appointments_booked=booked,
        appointments_shown=shown,
        sends_reminders=bool(record.sendsReminders),
        charges_no_show_fee=bool(record.chargesNoShowFee),
        hourly_labor_cost=clamp(record.avgHourlyLaborCost),
        qualifies_leads=bool(record.qualifiesLeads),
        percent_unqualified=percent_to_rate(record.percentageUnqualified),
        has_dormant_leads=bool(record.hasDormantLeads),
        total_dormant_leads=clamp(record.totalDormantLeads),
        database_age=_bucket(record.databaseAge, DORMANT_VIABILITY_RATES, DEFAULT_DATABASE_AGE),
        ever_recontacted_dormant=bool(record.everRecontactedDormant),
        percent_recontacted_dormant=percent_to_rate(record.percentageRecontactedDormant),
        has_past_customers=bool(record.hasPastCustomers),
        num_past_customers=clamp(record.numPastCustomers),
        time_since_last_purchase=_bucket(
            record.avgTimeSinceLastPurchase,
            PAST_CUSTOMER_WINNABLE_SHARES,
            DEFAULT_TIME_SINCE_LAST_PURCHASE,
        ),
        sends_reengagement_campaigns=bool(record.sendsReengagementCampaigns),
        reengagement_frequency=reengagement_frequency,
    )
