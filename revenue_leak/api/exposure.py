"""
FastAPI router module for the live setter cockpit.

Key Endpoints:
- POST /exposure - Base exposure formula (daily / monthly / yearly loss)
- POST /cockpit - Full cockpit evaluation: exposure, status, constraint focus

Both endpoints are stateless: the front-end posts the whole current form
state on every keystroke and renders the response. Cockpit disqualification
thresholds come from Settings and can be overridden per deployment.

Dependencies:
- revenue_leak/core/dependencies.py: SettingsDep
- revenue_leak/services/exposure.py: compute_exposure
- revenue_leak/services/cockpit.py: calculate_cockpit_result
"""

import logging

from fastapi import APIRouter, Body, HTTPException

from revenue_leak.core.dependencies import SettingsDep
from revenue_leak.models.schemas import (
    CockpitInput,
    CockpitResult,
    ExposureRequest,
    ExposureResult,
)
from revenue_leak.services.cockpit import calculate_cockpit_result
from revenue_leak.services.exposure import compute_exposure


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/exposure", response_model=ExposureResult)
async def compute_exposure_endpoint(
    request: ExposureRequest = Body(...),
) -> ExposureResult:
    """
    Compute missed-call revenue exposure.

    Missing or out-of-range values are clamped, never rejected.

    Args:
        request: Weekly inquiries, missed ratio, average ticket, close rate (0-1)

    Returns:
        ExposureResult
    """
    try:
        result = compute_exposure(
            request.inquiriesWeekly,
            request.missedPer10,
            request.avgTicket,
            request.closeRate,
        )
        logger.info(f"Exposure computed: monthly={result.monthly}")
        return result
    except Exception as e:
        logger.error(f"Error computing exposure: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute exposure: {str(e)}",
        )


@router.post("/cockpit", response_model=CockpitResult)
async def evaluate_cockpit_endpoint(
    settings: SettingsDep,
    input_data: CockpitInput = Body(...),
) -> CockpitResult:
    """
    Evaluate the live cockpit form.

    Args:
        settings: Injected settings carrying the disqualification thresholds
        input_data: Current cockpit form state

    Returns:
        CockpitResult with status, surfaced exposure and constraint focus
    """
    try:
        result = calculate_cockpit_result(input_data, settings)
        logger.info(f"Cockpit evaluated: status={result.status.value}")
        return result
    except Exception as e:
        logger.error(f"Error evaluating cockpit: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to evaluate cockpit: {str(e)}",
        )
