"""
FastAPI router module for the full revenue leak breakdown.

Key Endpoints:
- POST /leaks - Ranked leak breakdown with reactivation opportunity
- POST /leaks/scenarios/missed-calls - "What if missed calls were captured?"

The response is the JSON document the front-end persists to client-side
storage and renders on the results page.
"""

import logging

from fastapi import APIRouter, Body, HTTPException

from revenue_leak.models.schemas import BusinessInputRecord, CalculationResult, MissedCallScenario
from revenue_leak.services.calculator import calculate_leaks
from revenue_leak.services.scenarios import simulate_missed_call_capture


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CalculationResult)
async def calculate_leaks_endpoint(
    record: BusinessInputRecord = Body(...),
) -> CalculationResult:
    """
    Calculate every revenue leak for a business.

    Args:
        record: Wizard input record (every field optional)

    Returns:
        CalculationResult
    """
    try:
        result = calculate_leaks(record)
        logger.info(
            f"Leaks calculated for {record.businessName or 'unnamed business'}: "
            f"{len(result.leaks)} leaks, total_monthly={result.totalMonthlyLoss}"
        )
        return result
    except Exception as e:
        logger.error(f"Error calculating leaks: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to calculate leaks: {str(e)}",
        )


@router.post("/scenarios/missed-calls", response_model=MissedCallScenario)
async def missed_call_scenario_endpoint(
    record: BusinessInputRecord = Body(...),
) -> MissedCallScenario:
    """
    Project total monthly loss with 65% of missed-call loss recovered.

    Args:
        record: Wizard input record

    Returns:
        MissedCallScenario (available=False when there is no missed-call leak)
    """
    try:
        scenario = simulate_missed_call_capture(calculate_leaks(record))
        logger.info(f"Missed-call scenario: available={scenario.available} recovered={scenario.recoveredAmount}")
        return scenario
    except Exception as e:
        logger.error(f"Error simulating missed-call capture: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to simulate missed-call capture: {str(e)}",
        )
