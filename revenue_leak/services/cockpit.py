"""
Cockpit Qualification Service

Real-time single-screen variant of the calculator used by a setter during a
live call, expressed as an explicit classification:

    INCOMPLETE -> {QUALIFIED, DISQUALIFIED} -> BOOKED

- INCOMPLETE: any of inquiries, missed ratio, avg ticket is zero
- DISQUALIFIED: inquiries < 10 OR missedPer10 < 2 OR avgTicket < 300
  OR conservative monthly exposure < 3000 (thresholds from Settings)
- QUALIFIED: otherwise
- BOOKED: caller-set flag, overrides QUALIFIED/DISQUALIFIED once inputs are complete

Status is a pure function of the latest input; nothing is remembered between
calls. Disqualification is judged on the conservative (floor) exposure only,
regardless of which exposure mode the caller displays.
"""

import logging
from typing import List, Optional

from revenue_leak.core.config import Settings, get_settings
from revenue_leak.models.enums import CockpitStatus, ExposureMode
from revenue_leak.models.schemas import CockpitInput, CockpitResult, ExposureResult
from revenue_leak.services.exposure import compute_exposure, compute_full_exposure
from revenue_leak.services.normalizer import clamp, get_industry_default_close_rate, percent_to_rate


logger = logging.getLogger(__name__)


# =============================================================================
# Status Copy
# =============================================================================

STATUS_REASONS = {
    CockpitStatus.INCOMPLETE: "Awaiting core volume data",
    CockpitStatus.QUALIFIED: "HIGH IMPACT DETECTED",
    CockpitStatus.BOOKED: "BOOKING CONFIRMED",
}

NEXT_STEPS = {
    CockpitStatus.INCOMPLETE: "Enter the 3 fields to generate a directional estimate.",
    CockpitStatus.DISQUALIFIED: "Surface consequence of inaction before proceeding.",
    CockpitStatus.QUALIFIED: "This is worth a 15-minute verification against actual call logs.",
    CockpitStatus.BOOKED: "Ready for Closer Briefing.",
}

# Priority order for single-constraint focus
CONSTRAINT_FOLLOW_UP = "Follow-Up Breakdown"
CONSTRAINT_AFTER_HOURS = "After-Hours Coverage Gap"
CONSTRAINT_SLOW_RESPONSE = "Slow Response Time"
CONSTRAINT_LEAD_CAPTURE = "Lead Capture Failure"
CONSTRAINT_INCOMPLETE = "Incomplete Data"


def is_incomplete(inquiries_weekly: float, missed_per_10: float, avg_ticket: float) -> bool:
    """True when any of the three core cockpit fields is zero."""
    return inquiries_weekly == 0 or missed_per_10 == 0 or avg_ticket == 0


def evaluate_disqualification(
    inquiries_weekly: float,
    missed_per_10: float,
    avg_ticket: float,
    conservative_monthly: float,
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    Evaluate every disqualification predicate against the conservative exposure.

    Thresholds are strict lower bounds: a value equal to the threshold passes.

    Args:
        inquiries_weekly: Clamped weekly inquiries
        missed_per_10: Clamped missed-out-of-10 ratio
        avg_ticket: Clamped average ticket
        conservative_monthly: Monthly exposure computed with the user close rate
        settings: Optional settings override (uses get_settings() if not provided)

    Returns:
        List of reason code strings; empty when the call qualifies
    """
    if settings is None:
        settings = get_settings()

    reasons: List[str] = []

    if inquiries_weekly < settings.cockpit_min_inquiries:
        reasons.append(
            f"LOW_INQUIRY_VOLUME: {inquiries_weekly:g} inquiries/week (min {settings.cockpit_min_inquiries:g})"
        )
    if missed_per_10 < settings.cockpit_min_missed_per_10:
        reasons.append(
            f"LOW_MISSED_RATIO: {missed_per_10:g}/10 missed (min {settings.cockpit_min_missed_per_10:g})"
        )
    if avg_ticket < settings.cockpit_min_avg_ticket:
        reasons.append(
            f"LOW_TICKET: ${avg_ticket:,.0f} average ticket (min ${settings.cockpit_min_avg_ticket:,.0f})"
        )
    if conservative_monthly < settings.cockpit_min_monthly_exposure:
        reasons.append(
            f"INSUFFICIENT_IMPACT: ${conservative_monthly:,.0f}/month conservative exposure "
            f"(min ${settings.cockpit_min_monthly_exposure:,.0f})"
        )

    return reasons


def determine_status(incomplete: bool, disqualifiers: List[str], is_booked: bool) -> CockpitStatus:
    """
    Resolve the cockpit status.

    BOOKED needs a complete input set; it then overrides both QUALIFIED and
    DISQUALIFIED.
    """
    if incomplete:
        return CockpitStatus.INCOMPLETE
    if is_booked:
        return CockpitStatus.BOOKED
    if disqualifiers:
        return CockpitStatus.DISQUALIFIED
    return CockpitStatus.QUALIFIED


def identify_primary_constraint(input_data: CockpitInput, incomplete: bool) -> str:
    """
    Pick the single constraint to focus the conversation on.

    Priority: manual override > follow-up breakdown > after-hours gap >
    slow response > lead capture failure.
    """
    if incomplete:
        return CONSTRAINT_INCOMPLETE
    if input_data.manualConstraintOverride and input_data.customConstraint:
        return input_data.customConstraint
    if input_data.followUpBroken:
        return CONSTRAINT_FOLLOW_UP
    if input_data.afterHoursIssue:
        return CONSTRAINT_AFTER_HOURS
    if input_data.slowResponse:
        return CONSTRAINT_SLOW_RESPONSE
    return CONSTRAINT_LEAD_CAPTURE


def resolve_close_rate(input_data: CockpitInput) -> float:
    """Cockpit close rate as a 0.0-1.0 fraction; industry default when not entered."""
    if input_data.closeRate is None:
        return get_industry_default_close_rate(input_data.industry)
    return percent_to_rate(input_data.closeRate)


def calculate_cockpit_result(
    input_data: CockpitInput,
    settings: Optional[Settings] = None,
) -> CockpitResult:
    """
    Main cockpit evaluation.

    Runs the exposure formula twice (conservative with the user close rate,
    full with close rate 1.0), classifies the call, and surfaces the exposure
    selected by input_data.exposureMode.

    Args:
        input_data: CockpitInput from the live cockpit form
        settings: Optional settings override for the disqualification thresholds

    Returns:
        CockpitResult
    """
    inquiries = clamp(input_data.inquiriesWeekly)
    missed_per_10 = clamp(input_data.missedPer10, 0, 10)
    avg_ticket = clamp(input_data.avgTicket)
    close_rate = resolve_close_rate(input_data)

    conservative: ExposureResult = compute_exposure(inquiries, missed_per_10, avg_ticket, close_rate)
    full: ExposureResult = compute_full_exposure(inquiries, missed_per_10, avg_ticket)

    incomplete = is_incomplete(inquiries, missed_per_10, avg_ticket)
    disqualifiers: List[str] = []
    if not incomplete:
        disqualifiers = evaluate_disqualification(
            inquiries, missed_per_10, avg_ticket, conservative.monthly, settings
        )

    status = determine_status(incomplete, disqualifiers, input_data.isBooked)

    if status == CockpitStatus.DISQUALIFIED:
        status_reason = "; ".join(disqualifiers)
    else:
        status_reason = STATUS_REASONS[status]

    surfaced = full if input_data.exposureMode == ExposureMode.FULL else conservative

    logger.debug(
        f"Cockpit evaluated: status={status.value} mode={input_data.exposureMode.value} "
        f"monthly={surfaced.monthly}"
    )

    return CockpitResult(
        status=status,
        exposureMode=input_data.exposureMode,
        dailyExposure=surfaced.daily,
        monthlyExposure=surfaced.monthly,
        yearlyExposure=surfaced.yearly,
        missedCalls=conservative.missedWeekly,
        fullExposure=full,
        conservativeExposure=conservative,
        statusReason=status_reason,
        nextStep=NEXT_STEPS[status],
        certaintyLabel="N/A" if incomplete else f"Out of 10 ({missed_per_10:g})",
        primaryConstraint=identify_primary_constraint(input_data, incomplete),
    )
