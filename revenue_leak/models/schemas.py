"""
Pydantic request/response models for the Revenue Leak calculation service.

This module provides type-safe data validation and serialization for the engine's
input records and result records:
- BusinessInputRecord: the flat wizard record
- CockpitInput / CockpitResult: the live setter cockpit
- ExposureResult: the base exposure formula output
- Leak, DormantLeadsResult, PastCustomersResult, ReactivationLeak, CalculationResult:
  the full multi-leak breakdown

Field names are camelCase so the serialized JSON matches what the front-end
persists to client-side storage.

Input models accept any float (negative, NaN, out of range):
numeric clamping happens in the normalizer, never at validation time, so the
calculator can always render a number while the user is still typing.

Result models are frozen; every evaluation constructs fresh instances.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from revenue_leak.models.enums import (
    CockpitStatus,
    ExposureMode,
    FixComplexity,
    LeakType,
    Severity,
)


# =============================================================================
# Input Models
# =============================================================================


class BusinessInputRecord(BaseModel):
    """
    Input data for the full leak calculation.

    Every numeric field is optional; absent fields are treated as zero or a
    documented default by the normalizer.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "businessName": "Bright Smile Dental",
                "industry": "Dentist",
                "totalMonthlyLeads": 200,
                "inboundCalls": 140,
                "closedDealsPerMonth": 50,
                "avgResponseTime": "1-4hrs",
                "percentageFollowedUp": 60,
                "avgFollowUpAttempts": 2,
                "missedCallRate": "20-30%",
                "avgHoldTime": 2,
                "requiresAppointments": True,
                "appointmentsBooked": 120,
                "appointmentsShowUp": 96,
                "avgTransactionValue": 1200,
            }
        },
    )

    # Identity
    businessName: Optional[str] = Field(default=None, description="Business name")
    industry: Optional[str] = Field(default=None, description="Industry (drives default close rate)")

    # Volume (per month)
    totalMonthlyLeads: Optional[float] = Field(default=None, description="Total inquiries per month")
    inboundCalls: Optional[float] = Field(default=None, description="Inbound calls per month")
    webFormSubmissions: Optional[float] = Field(default=None, description="Web form submissions per month")
    socialInquiries: Optional[float] = Field(default=None, description="Social/DM inquiries per month")

    # Sales process
    closedDealsPerMonth: Optional[float] = Field(default=None, description="Deals closed per month")
    avgResponseTime: Optional[str] = Field(default=None, description="Response time bucket (<15min ... >24hrs)")
    followUpAllLeads: Optional[bool] = Field(default=None, description="Whether every lead is followed up")
    percentageFollowedUp: Optional[float] = Field(default=None, description="Percent of leads followed up (0-100)")
    avgFollowUpAttempts: Optional[float] = Field(default=None, description="Average follow-up attempts per lead")
    consultationLength: Optional[float] = Field(default=None, description="Consultation length in minutes")

    # Operations
    businessHoursStart: Optional[float] = Field(default=None, description="Opening hour (0-24)")
    businessHoursEnd: Optional[float] = Field(default=None, description="Closing hour (0-24)")
    openSaturday: Optional[bool] = Field(default=None)
    openSunday: Optional[bool] = Field(default=None)
    answersAfterHours: Optional[bool] = Field(default=None, description="Calls answered outside business hours")
    answersWeekends: Optional[bool] = Field(default=None, description="Calls answered on closed weekend days")
    missedCallRate: Optional[str] = Field(default=None, description="Missed-call rate bucket (0-10% ... 40%+)")
    avgHoldTime: Optional[float] = Field(default=None, description="Average hold time in minutes")

    # Appointments
    requiresAppointments: Optional[bool] = Field(default=None)
    appointmentsBooked: Optional[float] = Field(default=None, description="Appointments booked per month")
    appointmentsShowUp: Optional[float] = Field(default=None, description="Appointments attended per month")
    sendsReminders: Optional[bool] = Field(default=None)
    reminderCount: Optional[float] = Field(default=None)
    chargesNoShowFee: Optional[bool] = Field(default=None)

    # Team
    numSalesStaff: Optional[float] = Field(default=None)
    avgHourlyLaborCost: Optional[float] = Field(default=None, description="Loaded hourly staff cost")
    usesCRM: Optional[bool] = Field(default=None)
    qualifiesLeads: Optional[bool] = Field(default=None)
    percentageUnqualified: Optional[float] = Field(default=None, description="Percent of leads unqualified (0-100)")

    # Reactivation: dormant leads
    hasDormantLeads: Optional[bool] = Field(default=None)
    totalDormantLeads: Optional[float] = Field(default=None)
    databaseAge: Optional[str] = Field(default=None, description="Database age bucket")
    everRecontactedDormant: Optional[bool] = Field(default=None)
    percentageRecontactedDormant: Optional[float] = Field(default=None, description="Percent already recontacted")

    # Reactivation: past customers
    hasPastCustomers: Optional[bool] = Field(default=None)
    numPastCustomers: Optional[float] = Field(default=None)
    avgTimeSinceLastPurchase: Optional[str] = Field(default=None)
    sendsReengagementCampaigns: Optional[bool] = Field(default=None)
    reengagementFrequency: Optional[str] = Field(default=None)

    # Customer value
    repeatCustomers: Optional[bool] = Field(default=None)
    avgPurchasesPerCustomer: Optional[float] = Field(default=None)
    avgTransactionValue: Optional[float] = Field(default=None, description="Average ticket in dollars")


class ExposureRequest(BaseModel):
    """Raw arguments of the base exposure formula."""
    inquiriesWeekly: Optional[float] = Field(default=None, description="Inbound inquiries per week")
    missedPer10: Optional[float] = Field(default=None, description="Missed calls out of every 10 (0-10)")
    avgTicket: Optional[float] = Field(default=None, description="Average ticket in dollars")
    closeRate: Optional[float] = Field(default=None, description="Close rate as a 0.0-1.0 fraction")


class CockpitInput(BaseModel):
    """
    Input for the real-time setter cockpit.

    closeRate is the form's 0-100 percentage; when absent the industry
    default close rate is used.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "inquiriesWeekly": 80,
                "missedPer10": 3,
                "avgTicket": 4500,
                "closeRate": 35,
                "exposureMode": "floor",
            }
        },
    )

    inquiriesWeekly: Optional[float] = Field(default=None)
    missedPer10: Optional[float] = Field(default=None)
    avgTicket: Optional[float] = Field(default=None)
    closeRate: Optional[float] = Field(default=None, description="Close rate percentage (0-100)")
    industry: Optional[str] = Field(default=None)
    exposureMode: ExposureMode = Field(default=ExposureMode.FLOOR)
    isBooked: bool = Field(default=False, description="A scheduling action occurred")
    slowResponse: bool = Field(default=False)
    afterHoursIssue: bool = Field(default=False)
    followUpBroken: bool = Field(default=False)
    manualConstraintOverride: bool = Field(default=False)
    customConstraint: Optional[str] = Field(default=None)


class ReactivationROIRequest(BaseModel):
    """Inputs for the interactive reactivation ROI projection."""
    record: BusinessInputRecord
    campaignInvestment: Optional[float] = Field(default=None, description="Campaign spend (500-10000)")
    expectedResponseRate: Optional[float] = Field(default=None, description="Response rate percent (15-35)")


# =============================================================================
# Result Models
# =============================================================================


class ExposureResult(BaseModel):
    """
    Output of the base exposure formula.

    missedWeekly/missedMonthly are rounded to 0.1 calls; money fields are whole dollars.
    """
    model_config = ConfigDict(frozen=True)

    missedRate: float = 0.0
    missedWeekly: float = 0.0
    missedMonthly: float = 0.0
    daily: int = 0
    monthly: int = 0
    yearly: int = 0


class CockpitResult(BaseModel):
    """Output of the live cockpit classification."""
    model_config = ConfigDict(frozen=True)

    status: CockpitStatus
    exposureMode: ExposureMode = ExposureMode.FLOOR
    dailyExposure: int = 0
    monthlyExposure: int = 0
    yearlyExposure: int = 0
    missedCalls: float = 0.0
    fullExposure: ExposureResult = Field(default_factory=ExposureResult)
    conservativeExposure: ExposureResult = Field(default_factory=ExposureResult)
    statusReason: str = ""
    nextStep: str = ""
    certaintyLabel: str = "N/A"
    primaryConstraint: str = ""


class Leak(BaseModel):
    """
    A single revenue leak estimate.

    rank and severity are assigned by the ranking aggregator; a leak fresh out
    of the catalog carries rank 0 and severity low.
    """
    model_config = ConfigDict(frozen=True)

    type: LeakType
    label: str
    monthlyLoss: int = 0
    annualLoss: int = 0
    monthlyLossRange: Tuple[int, int] = (0, 0)
    annualLossRange: Tuple[int, int] = (0, 0)
    severity: Severity = Severity.LOW
    rank: int = 0
    quickWin: bool = False
    constraintLabel: str = ""
    fixComplexity: FixComplexity = FixComplexity.MEDIUM
    timeToImpact: str = ""
    details: Dict[str, Any] = Field(default_factory=dict)


class DormantLeadsResult(BaseModel):
    """Dormant-lead reactivation estimate. Rates are whole percentages."""
    model_config = ConfigDict(frozen=True)

    viableLeads: int
    viabilityRate: int
    databaseAge: str
    recontactStatus: str
    expectedResponseRate: int
    bestCaseResponseRate: int
    expectedCustomers: float
    bestCaseCustomers: float
    monthlyLoss: int
    annualLoss: int
    upside: int


class PastCustomersResult(BaseModel):
    """Past-customer win-back estimate. Rates are whole percentages."""
    model_config = ConfigDict(frozen=True)

    winnableCustomers: int
    currentlyRecovered: int
    timeSinceLastPurchase: str
    winBackRate: int
    returnPurchaseBonus: int
    currentStatus: str
    recommendedFrequency: str
    frequencyScore: int
    monthlyLoss: int
    annualLoss: int
    upside: int


class ReactivationLeak(BaseModel):
    """Combined reactivation opportunity (dormant leads + past customers)."""
    model_config = ConfigDict(frozen=True)

    dormantLeads: Optional[DormantLeadsResult] = None
    pastCustomers: Optional[PastCustomersResult] = None
    monthlyLoss: int = 0
    annualLoss: int = 0
    monthlyLossRange: Tuple[int, int] = (0, 0)
    annualLossRange: Tuple[int, int] = (0, 0)
    quickWinScore: int = 0
    expectedROI: str = "0x"
    paybackPeriod: str = "N/A"
    implementationTime: str = ""


class CalculationResult(BaseModel):
    """
    Full wizard result.

    - leaks: ranked operational leaks with monthlyLoss > 0
    - operationalLeaks: every operational leak evaluated, including zero-loss ones
    - allLeaks: ranked leaks plus the reactivation card, ordered by monthly loss
    """
    model_config = ConfigDict(frozen=True)

    leaks: List[Leak] = Field(default_factory=list)
    allLeaks: List[Leak] = Field(default_factory=list)
    operationalLeaks: List[Leak] = Field(default_factory=list)
    reactivationOpportunity: ReactivationLeak = Field(default_factory=ReactivationLeak)
    primaryConstraint: Optional[Leak] = None
    totalMonthlyLoss: int = 0
    totalAnnualLoss: int = 0


class MissedCallScenario(BaseModel):
    """'What if missed calls were captured?' projection."""
    model_config = ConfigDict(frozen=True)

    available: bool = False
    missedCallsLoss: int = 0
    recoveredAmount: int = 0
    newTotalMonthlyLoss: int = 0
    percentReduction: int = 0


class ReactivationROIProjection(BaseModel):
    """Campaign ROI projection for the reactivation opportunity."""
    model_config = ConfigDict(frozen=True)

    campaignInvestment: float
    expectedResponseRate: float
    totalContacts: int
    reactivatedCustomers: int
    revenueGenerated: int
    netProfit: int
    roi: float
    paybackDays: int
