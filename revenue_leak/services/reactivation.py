"""
Reactivation Model Service

Estimates recoverable monthly revenue sitting in a business's existing but
unconverted contact history. Two independent sub-models:

Dormant Leads:
    viableLeads       = totalDormantLeads x viabilityRate(databaseAge)
    expectedCustomers = viableLeads x 22% x close rate
    bestCaseCustomers = viableLeads x 35% x close rate
    monthlyLoss       = expectedCustomers x customer lifetime value
    upside            = monthlyLoss if never recontacted,
                        else monthlyLoss x (1 - share already recontacted)

Past Customers:
    eligible           = numPastCustomers x winnableShare(timeSinceLastPurchase)
    frequencyScore     = actual campaigns per year / recommended (quarterly), 0-100
    currentlyRecovered = eligible x winBackRate x frequencyScore
    winnableCustomers  = eligible - currentlyRecovered
    monthlyLoss        = winnableCustomers x winBackRate x ticket x (1 + returnPurchaseBonus)
    upside             = monthlyLoss x (1 - frequencyScore)

A business that answered "no" (or left the section blank) contributes a None
sub-result and zero loss; nothing here raises.
"""

import logging
import math
from typing import Optional

from revenue_leak.models.enums import LeakType
from revenue_leak.models.schemas import (
    DormantLeadsResult,
    PastCustomersResult,
    ReactivationLeak,
    ReactivationROIProjection,
)
from revenue_leak.services.constants import (
    BEST_CASE_RESPONSE_RATE,
    CAMPAIGNS_PER_YEAR,
    DEFAULT_CAMPAIGN_INVESTMENT,
    DEFAULT_ROI_RESPONSE_RATE_PCT,
    DORMANT_VIABILITY_RATES,
    EXPECTED_RESPONSE_RATE,
    MAX_CAMPAIGN_INVESTMENT,
    MAX_ROI_RESPONSE_RATE_PCT,
    MIN_CAMPAIGN_INVESTMENT,
    MIN_ROI_RESPONSE_RATE_PCT,
    MONTHS_PER_YEAR,
    PAST_CUSTOMER_WINNABLE_SHARES,
    QUICK_WIN_BASE_SCORE,
    QUICK_WIN_CONTACT_SATURATION,
    QUICK_WIN_CONTACT_WEIGHT,
    QUICK_WIN_UNTOUCHED_WEIGHT,
    RECOMMENDED_FREQUENCY,
    RETURN_PURCHASE_BONUS,
    TIME_TO_IMPACT,
    WIN_BACK_RATE,
)
from revenue_leak.services.normalizer import (
    NormalizedInput,
    clamp,
    loss_range,
    round_half_up,
    round_money,
)


logger = logging.getLogger(__name__)


def _to_percent(rate: float) -> int:
    return int(round_half_up(rate * 100))


# =============================================================================
# Dormant Leads
# =============================================================================


def describe_recontact_status(ever_recontacted: bool, percent_recontacted: float) -> str:
    """Human-readable recontact status for the dormant database."""
    if not ever_recontacted:
        return "Never recontacted"
    if percent_recontacted >= 1:
        return "Fully recontacted"
    return f"Partially recontacted ({_to_percent(percent_recontacted)}%)"


def calculate_dormant_leads(data: NormalizedInput) -> Optional[DormantLeadsResult]:
    """
    Dormant-lead reactivation estimate.

    Args:
        data: Normalized input record

    Returns:
        DormantLeadsResult, or None when the business has no dormant database
    """
    if not data.has_dormant_leads or data.total_dormant_leads <= 0:
        return None

    viability_rate = DORMANT_VIABILITY_RATES[data.database_age]
    viable_leads = int(round_half_up(data.total_dormant_leads * viability_rate))

    expected_customers = viable_leads * EXPECTED_RESPONSE_RATE * data.close_rate
    best_case_customers = viable_leads * BEST_CASE_RESPONSE_RATE * data.close_rate

    monthly_loss = round_money(expected_customers * data.customer_lifetime_value)

    if data.ever_recontacted_dormant:
        upside = round_money(monthly_loss * (1 - data.percent_recontacted_dormant))
    else:
        upside = monthly_loss

    return DormantLeadsResult(
        viableLeads=viable_leads,
        viabilityRate=_to_percent(viability_rate),
        databaseAge=data.database_age,
        recontactStatus=describe_recontact_status(
            data.ever_recontacted_dormant, data.percent_recontacted_dormant
        ),
        expectedResponseRate=_to_percent(EXPECTED_RESPONSE_RATE),
        bestCaseResponseRate=_to_percent(BEST_CASE_RESPONSE_RATE),
        expectedCustomers=round_half_up(expected_customers, 1),
        bestCaseCustomers=round_half_up(best_case_customers, 1),
        monthlyLoss=monthly_loss,
        annualLoss=monthly_loss * MONTHS_PER_YEAR,
        upside=upside,
    )


# =============================================================================
# Past Customers
# =============================================================================


def calculate_frequency_score(sends_campaigns: bool, frequency: Optional[str]) -> int:
    """
    How close the actual re-engagement cadence is to the recommended cadence.

    100 = recommended cadence or more often; proportionally lower otherwise;
    0 when no campaigns are sent. A campaign sender with an unknown cadence
    is scored as "rarely".
    """
    if not sends_campaigns:
        return 0
    per_year = CAMPAIGNS_PER_YEAR.get(frequency or "rarely", CAMPAIGNS_PER_YEAR["rarely"])
    recommended = CAMPAIGNS_PER_YEAR[RECOMMENDED_FREQUENCY]
    return int(min(100, round_half_up(per_year / recommended * 100)))


def calculate_past_customers(data: NormalizedInput) -> Optional[PastCustomersResult]:
    """
    Past-customer win-back estimate.

    Args:
        data: Normalized input record

    Returns:
        PastCustomersResult, or None when the business has no past customers
    """
    if not data.has_past_customers or data.num_past_customers <= 0:
        return None

    winnable_share = PAST_CUSTOMER_WINNABLE_SHARES[data.time_since_last_purchase]
    eligible = int(round_half_up(data.num_past_customers * winnable_share))

    frequency_score = calculate_frequency_score(
        data.sends_reengagement_campaigns, data.reengagement_frequency
    )
    currently_recovered = int(round_half_up(eligible * WIN_BACK_RATE * frequency_score / 100))
    winnable_customers = max(0, eligible - currently_recovered)

    monthly_loss = round_money(
        winnable_customers * WIN_BACK_RATE * data.avg_ticket * (1 + RETURN_PURCHASE_BONUS)
    )
    upside = round_money(monthly_loss * (1 - frequency_score / 100))

    if data.sends_reengagement_campaigns:
        current_status = f"Re-engaging {data.reengagement_frequency or 'on an unknown cadence'}"
    else:
        current_status = "No re-engagement campaigns"

    return PastCustomersResult(
        winnableCustomers=winnable_customers,
        currentlyRecovered=currently_recovered,
        timeSinceLastPurchase=data.time_since_last_purchase,
        winBackRate=_to_percent(WIN_BACK_RATE),
        returnPurchaseBonus=_to_percent(RETURN_PURCHASE_BONUS),
        currentStatus=current_status,
        recommendedFrequency=RECOMMENDED_FREQUENCY,
        frequencyScore=frequency_score,
        monthlyLoss=monthly_loss,
        annualLoss=monthly_loss * MONTHS_PER_YEAR,
        upside=upside,
    )


# =============================================================================
# Combined Opportunity
# =============================================================================


def calculate_quick_win_score(
    monthly_loss: int,
    total_contacts: int,
    total_upside: int,
) -> int:
    """
    Score (0-100) how quick a win the reactivation opportunity is.

    40 for any positive opportunity, up to 30 more for contact volume
    (saturating at 500 contacts), up to 30 more for the untouched share of
    the opportunity.
    """
    if monthly_loss <= 0:
        return 0
    contact_component = QUICK_WIN_CONTACT_WEIGHT * min(1.0, total_contacts / QUICK_WIN_CONTACT_SATURATION)
    untouched_component = QUICK_WIN_UNTOUCHED_WEIGHT * min(1.0, total_upside / monthly_loss)
    score = QUICK_WIN_BASE_SCORE + contact_component + untouched_component
    return int(min(100, round_half_up(score)))


def format_expected_roi(monthly_loss: int) -> str:
    """Monthly opportunity as a multiple of a default campaign budget, e.g. '12.5x'."""
    multiple = round_half_up(monthly_loss / DEFAULT_CAMPAIGN_INVESTMENT, 1)
    return f"{multiple:g}x"


def format_payback_period(monthly_loss: int) -> str:
    """Days for the opportunity to repay a default campaign budget."""
    if monthly_loss <= 0:
        return "N/A"
    days = math.ceil(DEFAULT_CAMPAIGN_INVESTMENT / monthly_loss * 30)
    return "1 day" if days == 1 else f"{days} days"


def calculate_reactivation(data: NormalizedInput) -> ReactivationLeak:
    """
    Combine the dormant-lead and past-customer sub-models.

    monthlyLoss is always the sum of the sub-model losses, a missing sub-model
    contributing 0.

    Args:
        data: Normalized input record

    Returns:
        ReactivationLeak
    """
    dormant = calculate_dormant_leads(data)
    past = calculate_past_customers(data)

    monthly_loss = (dormant.monthlyLoss if dormant else 0) + (past.monthlyLoss if past else 0)
    total_contacts = (dormant.viableLeads if dormant else 0) + (past.winnableCustomers if past else 0)
    total_upside = (dormant.upside if dormant else 0) + (past.upside if past else 0)
    low, high = loss_range(monthly_loss)

    logger.debug(f"Reactivation evaluated: monthly={monthly_loss} contacts={total_contacts}")

    return ReactivationLeak(
        dormantLeads=dormant,
        pastCustomers=past,
        monthlyLoss=monthly_loss,
        annualLoss=monthly_loss * MONTHS_PER_YEAR,
        monthlyLossRange=(low, high),
        annualLossRange=(low * MONTHS_PER_YEAR, high * MONTHS_PER_YEAR),
        quickWinScore=calculate_quick_win_score(monthly_loss, total_contacts, total_upside),
        expectedROI=format_expected_roi(monthly_loss),
        paybackPeriod=format_payback_period(monthly_loss),
        implementationTime=TIME_TO_IMPACT[LeakType.REACTIVATION],
    )


def project_reactivation_roi(
    reactivation: ReactivationLeak,
    customer_lifetime_value: float,
    campaign_investment: Optional[float] = None,
    expected_response_rate: Optional[float] = None,
) -> ReactivationROIProjection:
    """
    Project the return of a reactivation campaign.

    Args:
        reactivation: Combined reactivation opportunity
        customer_lifetime_value: Revenue per reactivated customer
        campaign_investment: Campaign spend, clamped to [500, 10000] (default 2000)
        expected_response_rate: Response rate percent, clamped to [15, 35] (default 22)

    Returns:
        ReactivationROIProjection
    """
    investment = clamp(
        DEFAULT_CAMPAIGN_INVESTMENT if campaign_investment is None else campaign_investment,
        MIN_CAMPAIGN_INVESTMENT,
        MAX_CAMPAIGN_INVESTMENT,
    )
    response_rate = clamp(
        DEFAULT_ROI_RESPONSE_RATE_PCT if expected_response_rate is None else expected_response_rate,
        MIN_ROI_RESPONSE_RATE_PCT,
        MAX_ROI_RESPONSE_RATE_PCT,
    )

    total_contacts = (
        (reactivation.dormantLeads.viableLeads if reactivation.dormantLeads else 0)
        + (reactivation.pastCustomers.winnableCustomers if reactivation.pastCustomers else 0)
    )
    reactivated_customers = int(round_half_up(total_contacts * response_rate / 100))
    revenue_generated = round_money(reactivated_customers * clamp(customer_lifetime_value))
    net_profit = round_money(revenue_generated - investment)
    roi = round_half_up(revenue_generated / investment, 1)
    payback_days = math.ceil(investment / revenue_generated * 30) if revenue_generated > 0 else 30

    return ReactivationROIProjection(
        campaignInvestment=investment,
        expectedResponseRate=response_rate,
        totalContacts=total_contacts,
        reactivatedCustomers=reactivated_customers,
        revenueGenerated=revenue_generated,
        netProfit=net_profit,
        roi=roi,
        paybackDays=payback_days,
    )
