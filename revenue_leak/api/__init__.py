"""
Revenue Leak API package initialization.

This package contains FastAPI router modules:
- exposure: live cockpit (POST /exposure, POST /cockpit)
- leaks: full leak breakdown and missed-call scenario (POST /leaks...)
- reactivation: campaign ROI projection (POST /reactivation/roi)
"""

from fastapi import APIRouter

from revenue_leak.api.exposure import router as exposure_router
from revenue_leak.api.leaks import router as leaks_router
from revenue_leak.api.reactivation import router as reactivation_router

# Create main API router
api_router = APIRouter()

api_router.include_router(exposure_router, tags=["cockpit"])  # /exposure and /cockpit
api_router.include_router(leaks_router, prefix="/leaks", tags=["leaks"])
api_router.include_router(reactivation_router, prefix="/reactivation", tags=["reactivation"])

__all__ = [
    "api_router",
    "exposure_router",
    "leaks_router",
    "reactivation_router",
]
