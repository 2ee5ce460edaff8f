"""
Result Assembler Service

Entry point of the wizard pipeline:

    BusinessInputRecord
        -> normalize_record
        -> {calculate_operational_leaks, calculate_reactivation}
        -> rank_leaks
        -> CalculationResult

Totals:
    totalMonthlyLoss = sum(ranked leak monthlyLoss) + reactivation monthlyLoss
    totalAnnualLoss  = totalMonthlyLoss x 12

The primary constraint is the rank-1 operational leak. Reactivation is kept
on its own track: it appears in allLeaks as a card but never takes a rank.
"""

import logging
from typing import Optional

from revenue_leak.models.enums import LeakType
from revenue_leak.models.schemas import (
    BusinessInputRecord,
    CalculationResult,
    Leak,
    ReactivationLeak,
    ReactivationROIProjection,
)
from revenue_leak.services.constants import MONTHS_PER_YEAR
from revenue_leak.services.leaks import build_leak, calculate_operational_leaks
from revenue_leak.services.normalizer import NormalizedInput, normalize_record
from revenue_leak.services.ranking import rank_leaks
from revenue_leak.services.reactivation import calculate_reactivation, project_reactivation_roi


logger = logging.getLogger(__name__)


def build_reactivation_card(reactivation: ReactivationLeak) -> Leak:
    """Unranked Leak view of the reactivation opportunity for the combined list."""
    return build_leak(
        LeakType.REACTIVATION,
        reactivation.monthlyLoss,
        {
            "quickWinScore": reactivation.quickWinScore,
            "expectedROI": reactivation.expectedROI,
            "paybackPeriod": reactivation.paybackPeriod,
            "dormantLeads": reactivation.dormantLeads.viableLeads if reactivation.dormantLeads else 0,
            "pastCustomers": reactivation.pastCustomers.winnableCustomers if reactivation.pastCustomers else 0,
        },
    )


def assemble_result(data: NormalizedInput) -> CalculationResult:
    """
    Run the leak catalog and reactivation model over a normalized record.

    Args:
        data: Normalized input record

    Returns:
        CalculationResult
    """
    operational = calculate_operational_leaks(data)
    ranked = rank_leaks(operational)
    reactivation = calculate_reactivation(data)

    all_leaks = list(ranked)
    if reactivation.monthlyLoss > 0:
        all_leaks.append(build_reactivation_card(reactivation))
        all_leaks.sort(key=lambda leak: leak.monthlyLoss, reverse=True)

    total_monthly = sum(leak.monthlyLoss for leak in ranked) + reactivation.monthlyLoss
    primary: Optional[Leak] = ranked[0] if ranked else None

    logger.debug(
        f"Leak calculation complete: {len(ranked)} ranked leaks, "
        f"total_monthly={total_monthly}, primary={primary.type.value if primary else None}"
    )

    return CalculationResult(
        leaks=ranked,
        allLeaks=all_leaks,
        operationalLeaks=operational,
        reactivationOpportunity=reactivation,
        primaryConstraint=primary,
        totalMonthlyLoss=total_monthly,
        totalAnnualLoss=total_monthly * MONTHS_PER_YEAR,
    )


def calculate_leaks(record: BusinessInputRecord) -> CalculationResult:
    """
    Main entry point: full revenue leak breakdown for one business.

    Pure and deterministic; never raises on numeric content.

    Args:
        record: BusinessInputRecord from the form layer

    Returns:
        CalculationResult
    """
    return assemble_result(normalize_record(record))


def project_campaign_roi(
    record: BusinessInputRecord,
    campaign_investment: Optional[float] = None,
    expected_response_rate: Optional[float] = None,
) -> ReactivationROIProjection:
    """
    ROI projection for a reactivation campaign aimed at a record's contact base.

    Args:
        record: BusinessInputRecord from the form layer
        campaign_investment: Campaign spend (default 2000)
        expected_response_rate: Response rate percent (default 22)

    Returns:
        ReactivationROIProjection
    """
    data = normalize_record(record)
    return project_reactivation_roi(
        calculate_reactivation(data),
        data.customer_lifetime_value,
        campaign_investment,
        expected_response_rate,
    )
