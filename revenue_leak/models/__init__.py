"""
Package initialization file for revenue_leak models.

Re-exports all Pydantic schemas and enumerations so other modules can import
data models from revenue_leak.models directly.

Usage:
    from revenue_leak.models import (
        BusinessInputRecord,
        CalculationResult,
        LeakType,
        Severity,
    )
"""

# =============================================================================
# Enums
# =============================================================================

from revenue_leak.models.enums import (
    CockpitStatus,
    DatabaseAge,
    ExposureMode,
    FixComplexity,
    LeakType,
    MissedCallRateBucket,
    ReengagementFrequency,
    ResponseTimeBucket,
    Severity,
    TimeSinceLastPurchase,
)

# =============================================================================
# Schemas
# =============================================================================

from revenue_leak.models.schemas import (
    # Inputs
    BusinessInputRecord,
    CockpitInput,
    ExposureRequest,
    ReactivationROIRequest,
    # Results
    CalculationResult,
    CockpitResult,
    DormantLeadsResult,
    ExposureResult,
    Leak,
    MissedCallScenario,
    PastCustomersResult,
    ReactivationLeak,
    ReactivationROIProjection,
)


__all__ = [
    # Enums
    "CockpitStatus",
    "DatabaseAge",
    "ExposureMode",
    "FixComplexity",
    "LeakType",
    "MissedCallRateBucket",
    "ReengagementFrequency",
    "ResponseTimeBucket",
    "Severity",
    "TimeSinceLastPurchase",
    # Inputs
    "BusinessInputRecord",
    "CockpitInput",
    "ExposureRequest",
    "ReactivationROIRequest",
    # Results
    "CalculationResult",
    "CockpitResult",
    "DormantLeadsResult",
    "ExposureResult",
    "Leak",
    "MissedCallScenario",
    "PastCustomersResult",
    "ReactivationLeak",
    "ReactivationROIProjection",
]
