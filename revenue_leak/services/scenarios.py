"""
What-if scenarios over a finished CalculationResult.
"""

from revenue_leak.models.enums import LeakType
from revenue_leak.models.schemas import CalculationResult, MissedCallScenario
from revenue_leak.services.constants import MISSED_CALL_CAPTURE_RECOVERY
from revenue_leak.services.normalizer import round_money


def simulate_missed_call_capture(result: CalculationResult) -> MissedCallScenario:
    """
    Project the total loss if most missed calls were captured.

    65% of the missed-calls leak is treated as recovered. Unavailable (all
    zeros, total unchanged) when the result has no positive missed-calls leak.

    Args:
        result: CalculationResult to project from

    Returns:
        MissedCallScenario
    """
    missed = next((leak for leak in result.leaks if leak.type == LeakType.MISSED_CALLS), None)
    if missed is None or missed.monthlyLoss <= 0:
        return MissedCallScenario(available=False, newTotalMonthlyLoss=result.totalMonthlyLoss)

    recovered = round_money(missed.monthlyLoss * MISSED_CALL_CAPTURE_RECOVERY)
    percent_reduction = (
        round_money(recovered / result.totalMonthlyLoss * 100) if result.totalMonthlyLoss > 0 else 0
    )

    return MissedCallScenario(
        available=True,
        missedCallsLoss=missed.monthlyLoss,
        recoveredAmount=recovered,
        newTotalMonthlyLoss=result.totalMonthlyLoss - recovered,
        percentReduction=percent_reduction,
    )
