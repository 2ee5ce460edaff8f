"""
FastAPI router module for reactivation campaign projections.

Key Endpoints:
- POST /reactivation/roi - Campaign ROI for a business's dormant leads and past customers

Investment is clamped to 500-10000 and the response rate to 15-35 percent,
the same ranges the results-page sliders allow.
"""

import logging

from fastapi import APIRouter, Body, HTTPException

from revenue_leak.models.schemas import ReactivationROIProjection, ReactivationROIRequest
from revenue_leak.services.calculator import project_campaign_roi


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/roi", response_model=ReactivationROIProjection)
async def project_roi_endpoint(
    request: ReactivationROIRequest = Body(...),
) -> ReactivationROIProjection:
    """
    Project the return of a reactivation campaign.

    Args:
        request: Wizard record plus optional campaign investment and response rate

    Returns:
        ReactivationROIProjection
    """
    try:
        projection = project_campaign_roi(
            request.record,
            request.campaignInvestment,
            request.expectedResponseRate,
        )
        logger.info(
            f"Reactivation ROI projected: contacts={projection.totalContacts} roi={projection.roi}"
        )
        return projection
    except Exception as e:
        logger.error(f"Error projecting reactivation ROI: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to project reactivation ROI: {str(e)}",
        )
