"""
Leak Catalog Service

One independent, pure computation per operational leak category. Each takes a
NormalizedInput and returns a Leak carrying a monthly-loss point estimate, a
+-20% confidence band, static fix metadata, and a details map of the raw
figures used (for the results view; never fed back into computation).

rank, severity and constraintLabel are left at their defaults here and are
assigned by the ranking aggregator.

A leak whose governing precondition is not met reports monthlyLoss = 0:
- missed-calls: needs inbound calls and a ticket
- slow-response: needs a response-time bucket slower than <15min
- no-follow-up: needs un-worked leads (follow-up coverage < 100% or attempts < 5)
- no-show: needs requiresAppointments and booked appointments
- unqualified-leads: needs an unqualified share and a labor cost
- after-hours: zeroed when the business already answers after hours
- hold-time: needs a non-zero hold time on answered calls
"""

import logging
from typing import Any, Callable, Dict, List

from revenue_leak.models.enums import FixComplexity, LeakType
from revenue_leak.models.schemas import Leak
from revenue_leak.services.constants import (
    AFTER_HOURS_BASE_SHARE,
    AFTER_HOURS_MAX_SHARE,
    AFTER_HOURS_REFERENCE_CLOSED_HOURS,
    AFTER_HOURS_UNRECOVERED_RATE,
    AFTER_HOURS_WEEKEND_DAY_SHARE,
    FIX_COMPLEXITY,
    FOLLOW_UP_RECOVERY_RATE,
    HOLD_ABANDONMENT_MAX,
    HOLD_ABANDONMENT_PER_MINUTE,
    IDEAL_RESPONSE_TIME,
    LEAK_LABELS,
    MONTHS_PER_YEAR,
    QUALIFIED_SCREENING_DISCOUNT,
    RECOMMENDED_FOLLOW_UP_ATTEMPTS,
    RESPONSE_TIME_PENALTIES,
    TIME_TO_IMPACT,
    WEEKS_PER_MONTH,
    WHY_IT_MATTERS,
)
from revenue_leak.services.exposure import compute_exposure
from revenue_leak.services.normalizer import NormalizedInput, loss_range, round_calls, round_half_up, round_money


logger = logging.getLogger(__name__)


def build_leak(leak_type: LeakType, monthly_loss: float, details: Dict[str, Any]) -> Leak:
    """
    Assemble an unranked Leak from a raw monthly loss.

    Args:
        leak_type: Leak category
        monthly_loss: Unrounded monthly dollar loss (negative values floor at 0)
        details: Descriptive figures for the results view

    Returns:
        Leak with whole-dollar losses and confidence bands
    """
    monthly = max(0, round_money(monthly_loss))
    annual = monthly * MONTHS_PER_YEAR
    low, high = loss_range(monthly)
    complexity = FIX_COMPLEXITY.get(leak_type, FixComplexity.MEDIUM)

    return Leak(
        type=leak_type,
        label=LEAK_LABELS[leak_type],
        monthlyLoss=monthly,
        annualLoss=annual,
        monthlyLossRange=(low, high),
        annualLossRange=(low * MONTHS_PER_YEAR, high * MONTHS_PER_YEAR),
        quickWin=complexity == FixComplexity.LOW,
        fixComplexity=complexity,
        timeToImpact=TIME_TO_IMPACT.get(leak_type, ""),
        details={**details, "whyItMatters": WHY_IT_MATTERS.get(leak_type, "")},
    )


# =============================================================================
# Individual Leak Computations
# =============================================================================


def calculate_missed_calls_leak(data: NormalizedInput) -> Leak:
    """
    Missed calls: missed-call rate x call volume x ticket x close rate.

    Delegates to the exposure formula with weekly calls = monthly calls / 4
    and missedPer10 = missed rate x 10.
    """
    weekly_calls = data.monthly_calls / WEEKS_PER_MONTH
    exposure = compute_exposure(
        weekly_calls,
        data.missed_call_rate * 10,
        data.avg_ticket,
        data.close_rate,
    )

    return build_leak(
        LeakType.MISSED_CALLS,
        exposure.monthly,
        {
            "monthlyCalls": round_calls(data.monthly_calls),
            "missedCallRate": round_half_up(data.missed_call_rate * 100),
            "missedCallRateBucket": data.missed_call_rate_bucket,
            "missedCallsPerWeek": exposure.missedWeekly,
            "missedCallsPerMonth": exposure.missedMonthly,
            "closeRate": round_half_up(data.close_rate * 100, 1),
            "avgTicket": round_money(data.avg_ticket),
        },
    )


def calculate_slow_response_leak(data: NormalizedInput) -> Leak:
    """
    Slow response: conversion penalty of the actual response-time bucket
    relative to the ideal (<15min), applied to lead volume x close rate x ticket.
    """
    penalty = RESPONSE_TIME_PENALTIES.get(data.response_time, 0.0) if data.response_time else 0.0
    lost_deals = data.monthly_leads * data.close_rate * penalty

    return build_leak(
        LeakType.SLOW_RESPONSE,
        lost_deals * data.avg_ticket,
        {
            "responseTime": data.response_time or "not provided",
            "idealResponseTime": IDEAL_RESPONSE_TIME,
            "conversionPenalty": round_half_up(penalty * 100),
            "monthlyLeads": round_calls(data.monthly_leads),
            "lostDealsPerMonth": round_calls(lost_deals),
        },
    )


def calculate_no_follow_up_leak(data: NormalizedInput) -> Leak:
    """
    Weak follow-up: leads that did not convert and were not worked to the
    recommended number of attempts, times a recovery rate, times ticket.

    Un-worked leads = unconverted x (1 - followed-up share)
                    + unconverted x followed-up share x attempt gap
    where attempt gap = (5 - attempts) / 5, floored at 0.
    """
    unconverted = data.monthly_leads * (1 - data.close_rate)

    attempts = data.follow_up_attempts
    if data.percent_followed_up > 0:
        # Followed-up leads received at least one touch
        attempts = max(attempts, 1.0)
    attempt_gap = max(0.0, RECOMMENDED_FOLLOW_UP_ATTEMPTS - attempts) / RECOMMENDED_FOLLOW_UP_ATTEMPTS

    never_followed = unconverted * (1 - data.percent_followed_up)
    under_worked = unconverted * data.percent_followed_up * attempt_gap
    unworked_leads = never_followed + under_worked
    recovered_deals = unworked_leads * FOLLOW_UP_RECOVERY_RATE

    return build_leak(
        LeakType.NO_FOLLOW_UP,
        recovered_deals * data.avg_ticket,
        {
            "percentFollowedUp": round_half_up(data.percent_followed_up * 100),
            "avgFollowUpAttempts": round_half_up(data.follow_up_attempts, 1),
            "recommendedAttempts": RECOMMENDED_FOLLOW_UP_ATTEMPTS,
            "leadsNotFollowedUp": round_calls(never_followed),
            "underWorkedLeads": round_calls(under_worked),
            "recoverableDealsPerMonth": round_calls(recovered_deals),
        },
    )


def calculate_no_show_leak(data: NormalizedInput) -> Leak:
    """
    No-shows: no-show rate x booked volume x appointment value, where
    appointment value = ticket x close rate. Only for appointment businesses.
    """
    booked = data.appointments_booked
    if not data.requires_appointments or booked <= 0:
        return build_leak(
            LeakType.NO_SHOW,
            0,
            {"requiresAppointments": data.requires_appointments, "appointmentsBooked": round_calls(booked)},
        )

    no_shows = booked - data.appointments_shown
    no_show_rate = no_shows / booked
    appointment_value = data.avg_ticket * data.close_rate

    return build_leak(
        LeakType.NO_SHOW,
        no_show_rate * booked * appointment_value,
        {
            "requiresAppointments": True,
            "appointmentsBooked": round_calls(booked),
            "appointmentsShown": round_calls(data.appointments_shown),
            "noShowsPerMonth": round_calls(no_shows),
            "noShowRate": round_half_up(no_show_rate * 100, 1),
            "appointmentValue": round_money(appointment_value),
            "sendsReminders": data.sends_reminders,
            "chargesNoShowFee": data.charges_no_show_fee,
        },
    )


def calculate_unqualified_leads_leak(data: NormalizedInput) -> Leak:
    """
    Unqualified leads: unqualified share x lead volume x consultation hours
    x staff hourly cost.

    A business that already screens leads before the consultation wastes
    only the unscreened share of that time.
    """
    unqualified_leads = data.monthly_leads * data.percent_unqualified
    screening_discount = QUALIFIED_SCREENING_DISCOUNT if data.qualifies_leads else 0.0
    wasted_hours = unqualified_leads * data.consultation_minutes / 60 * (1 - screening_discount)

    return build_leak(
        LeakType.UNQUALIFIED_LEADS,
        wasted_hours * data.hourly_labor_cost,
        {
            "percentUnqualified": round_half_up(data.percent_unqualified * 100),
            "unqualifiedLeadsPerMonth": round_calls(unqualified_leads),
            "consultationMinutes": round_half_up(data.consultation_minutes),
            "wastedHoursPerMonth": round_calls(wasted_hours),
            "hourlyLaborCost": round_money(data.hourly_labor_cost),
            "qualifiesLeads": data.qualifies_leads,
            "screeningDiscount": round_half_up(screening_discount * 100),
        },
    )


def estimate_after_hours_share(data: NormalizedInput) -> float:
    """
    Share of inquiries arriving outside business hours.

    30% for an 8-hour day, scaled by closed hours (16 closed hours = 1.0),
    plus 5% per weekend day that is closed and not answered, capped at 50%.
    """
    closed_hours = max(0.0, 24 - data.open_hours)
    share = AFTER_HOURS_BASE_SHARE * closed_hours / AFTER_HOURS_REFERENCE_CLOSED_HOURS

    if not data.answers_weekends:
        if not data.open_saturday:
            share += AFTER_HOURS_WEEKEND_DAY_SHARE
        if not data.open_sunday:
            share += AFTER_HOURS_WEEKEND_DAY_SHARE

    return min(share, AFTER_HOURS_MAX_SHARE)


def calculate_after_hours_leak(data: NormalizedInput) -> Leak:
    """
    After-hours: after-hours inquiry share x unrecovered share x close rate x ticket.
    Zero when after-hours calls are already answered.
    """
    if data.answers_after_hours:
        return build_leak(LeakType.AFTER_HOURS, 0, {"answersAfterHours": True})

    share = estimate_after_hours_share(data)
    after_hours_leads = data.monthly_leads * share
    lost_leads = after_hours_leads * AFTER_HOURS_UNRECOVERED_RATE

    return build_leak(
        LeakType.AFTER_HOURS,
        lost_leads * data.close_rate * data.avg_ticket,
        {
            "answersAfterHours": False,
            "openHoursPerDay": round_half_up(data.open_hours, 1),
            "afterHoursShare": round_half_up(share * 100),
            "afterHoursInquiriesPerMonth": round_calls(after_hours_leads),
            "unrecoveredRate": round_half_up(AFTER_HOURS_UNRECOVERED_RATE * 100),
        },
    )


def calculate_hold_time_leak(data: NormalizedInput) -> Leak:
    """
    Hold time: abandonment (10% per hold minute, capped at 60%) of answered
    calls x close rate x ticket.
    """
    answered_calls = data.monthly_calls * (1 - data.missed_call_rate)
    abandonment = min(data.avg_hold_minutes * HOLD_ABANDONMENT_PER_MINUTE, HOLD_ABANDONMENT_MAX)
    abandoned_calls = answered_calls * abandonment

    return build_leak(
        LeakType.HOLD_TIME,
        abandoned_calls * data.close_rate * data.avg_ticket,
        {
            "avgHoldMinutes": round_half_up(data.avg_hold_minutes, 1),
            "abandonmentRate": round_half_up(abandonment * 100),
            "answeredCallsPerMonth": round_calls(answered_calls),
            "abandonedCallsPerMonth": round_calls(abandoned_calls),
        },
    )


# =============================================================================
# Catalog
# =============================================================================

# Catalog order is also the tie-break order for equal losses
LEAK_CALCULATORS: Dict[LeakType, Callable[[NormalizedInput], Leak]] = {
    LeakType.MISSED_CALLS: calculate_missed_calls_leak,
    LeakType.SLOW_RESPONSE: calculate_slow_response_leak,
    LeakType.NO_FOLLOW_UP: calculate_no_follow_up_leak,
    LeakType.NO_SHOW: calculate_no_show_leak,
    LeakType.UNQUALIFIED_LEADS: calculate_unqualified_leads_leak,
    LeakType.AFTER_HOURS: calculate_after_hours_leak,
    LeakType.HOLD_TIME: calculate_hold_time_leak,
}


def calculate_operational_leaks(data: NormalizedInput) -> List[Leak]:
    """
    Run every operational leak computation.

    Returns:
        One unranked Leak per catalog entry, in catalog order, including zero-loss leaks
    """
    leaks = [calculator(data) for calculator in LEAK_CALCULATORS.values()]
    logger.debug(f"Leak catalog evaluated: {sum(1 for leak in leaks if leak.monthlyLoss > 0)} with positive loss")
    return leaks
