"""
Business assumption constants for the revenue leak engine.

Every multiplier the engine applies that is not a user input lives here, so
each assumption can be tuned and tested on its own. Rates are 0.0-1.0
fractions unless the name says PCT.

Deployment-tunable cockpit thresholds live in revenue_leak.core.config.Settings
instead.
"""

from typing import Dict

from revenue_leak.models.enums import (
    DatabaseAge,
    FixComplexity,
    LeakType,
    MissedCallRateBucket,
    ReengagementFrequency,
    ResponseTimeBucket,
    TimeSinceLastPurchase,
)


# =============================================================================
# Calendar Approximations
# =============================================================================

# Fixed 4-week month used for weekly -> monthly conversion
WEEKS_PER_MONTH: int = 4

# Fixed 30-day month used for monthly -> daily conversion
DAYS_PER_MONTH: int = 30

MONTHS_PER_YEAR: int = 12

# Confidence band applied around every point estimate
LOSS_RANGE_LOW_FACTOR: float = 0.8
LOSS_RANGE_HIGH_FACTOR: float = 1.2


# =============================================================================
# Industry Default Close Rates
# =============================================================================

INDUSTRY_CLOSE_RATES: Dict[str, float] = {
    "Dentist": 0.30,
    "Med Spa": 0.25,
    "HVAC": 0.35,
    "Plumber": 0.35,
    "Roofer": 0.30,
}

DEFAULT_CLOSE_RATE: float = 0.25


# =============================================================================
# Leak Catalog Assumptions
# =============================================================================

MISSED_CALL_RATES: Dict[str, float] = {
    MissedCallRateBucket.PCT_0_10.value: 0.05,
    MissedCallRateBucket.PCT_10_20.value: 0.15,
    MissedCallRateBucket.PCT_20_30.value: 0.25,
    MissedCallRateBucket.PCT_30_40.value: 0.35,
    MissedCallRateBucket.PCT_40_PLUS.value: 0.45,
}

# Used when the owner does not know their missed-call rate
UNKNOWN_MISSED_CALL_RATE: float = 0.27

# Conversion lost relative to answering inside 15 minutes
RESPONSE_TIME_PENALTIES: Dict[str, float] = {
    ResponseTimeBucket.UNDER_15_MIN.value: 0.0,
    ResponseTimeBucket.MIN_15_60.value: 0.10,
    ResponseTimeBucket.HRS_1_4.value: 0.20,
    ResponseTimeBucket.HRS_4_24.value: 0.30,
    ResponseTimeBucket.OVER_24_HRS.value: 0.40,
}

IDEAL_RESPONSE_TIME: str = ResponseTimeBucket.UNDER_15_MIN.value

# 80% of sales need 5+ follow-up attempts
RECOMMENDED_FOLLOW_UP_ATTEMPTS: int = 5

# Share of un-worked leads that close once properly followed up
FOLLOW_UP_RECOVERY_RATE: float = 0.10

# Inquiry share outside an 8-hour business day, scaled by closed hours
AFTER_HOURS_BASE_SHARE: float = 0.30
AFTER_HOURS_REFERENCE_CLOSED_HOURS: float = 16.0
AFTER_HOURS_WEEKEND_DAY_SHARE: float = 0.05
AFTER_HOURS_MAX_SHARE: float = 0.50

# 78% of callers won't leave a voicemail
AFTER_HOURS_UNRECOVERED_RATE: float = 0.78

DEFAULT_BUSINESS_HOURS_START: float = 9
DEFAULT_BUSINESS_HOURS_END: float = 17

# Every hold minute = 10% hang-up rate
HOLD_ABANDONMENT_PER_MINUTE: float = 0.10
HOLD_ABANDONMENT_MAX: float = 0.60

# Default consultation length when not supplied (minutes)
DEFAULT_CONSULTATION_MINUTES: float = 30

# Screening before consultation catches half of the poor-fit leads
QUALIFIED_SCREENING_DISCOUNT: float = 0.50


# =============================================================================
# Leak Presentation Tables
# =============================================================================

LEAK_LABELS: Dict[LeakType, str] = {
    LeakType.MISSED_CALLS: "Missed Calls",
    LeakType.SLOW_RESPONSE: "Slow Lead Response",
    LeakType.NO_FOLLOW_UP: "Weak Follow-Up",
    LeakType.NO_SHOW: "No-Show Appointments",
    LeakType.UNQUALIFIED_LEADS: "Unqualified Leads",
    LeakType.AFTER_HOURS: "After-Hours Inquiries",
    LeakType.HOLD_TIME: "Hold-Time Abandonment",
    LeakType.REACTIVATION: "Database Reactivation",
}

FIX_COMPLEXITY: Dict[LeakType, FixComplexity] = {
    LeakType.MISSED_CALLS: FixComplexity.LOW,
    LeakType.AFTER_HOURS: FixComplexity.LOW,
    LeakType.SLOW_RESPONSE: FixComplexity.LOW,
    LeakType.NO_FOLLOW_UP: FixComplexity.MEDIUM,
    LeakType.NO_SHOW: FixComplexity.LOW,
    LeakType.UNQUALIFIED_LEADS: FixComplexity.MEDIUM,
    LeakType.HOLD_TIME: FixComplexity.MEDIUM,
    LeakType.REACTIVATION: FixComplexity.LOW,
}

TIME_TO_IMPACT: Dict[LeakType, str] = {
    LeakType.MISSED_CALLS: "14-21 days",
    LeakType.AFTER_HOURS: "7-14 days",
    LeakType.SLOW_RESPONSE: "7-14 days",
    LeakType.NO_FOLLOW_UP: "21-30 days",
    LeakType.NO_SHOW: "7-14 days",
    LeakType.UNQUALIFIED_LEADS: "14-21 days",
    LeakType.HOLD_TIME: "14-21 days",
    LeakType.REACTIVATION: "7-14 days",
}

WHY_IT_MATTERS: Dict[LeakType, str] = {
    LeakType.MISSED_CALLS: "78% of customers buy from the first responder",
    LeakType.AFTER_HOURS: "30%+ of high-intent buyers call outside business hours",
    LeakType.SLOW_RESPONSE: "5-minute response = 100x higher contact rate than 30 min",
    LeakType.NO_FOLLOW_UP: "80% of sales require 5+ follow-up attempts to close",
    LeakType.NO_SHOW: "Every empty slot costs staff time and blocks paying customers",
    LeakType.UNQUALIFIED_LEADS: "Unqualified leads drain 15+ hours/week of team capacity",
    LeakType.HOLD_TIME: "Every minute on hold increases hang-up rate by 10%",
    LeakType.REACTIVATION: "Past leads convert 3-5x faster than cold outreach",
}


# =============================================================================
# Ranking & Severity
# Share of total operational monthly loss contributed by one leak.
# =============================================================================

SEVERITY_CRITICAL_SHARE: float = 0.40
SEVERITY_HIGH_SHARE: float = 0.20
SEVERITY_MEDIUM_SHARE: float = 0.10

PRIMARY_CONSTRAINT_LABEL: str = "Primary Constraint"
SECONDARY_CONSTRAINT_LABEL: str = "Secondary Constraint"
CONTRIBUTING_LEAK_LABEL: str = "Contributing Leak"


# =============================================================================
# Reactivation Model Assumptions
# =============================================================================

# Share of a dormant database still reachable and interested, by age
DORMANT_VIABILITY_RATES: Dict[str, float] = {
    DatabaseAge.MONTHS_0_3.value: 0.70,
    DatabaseAge.MONTHS_3_6.value: 0.55,
    DatabaseAge.MONTHS_6_12.value: 0.40,
    DatabaseAge.YEARS_1_2.value: 0.25,
    DatabaseAge.YEARS_2_PLUS.value: 0.15,
}

# Unknown age is treated as the oldest bucket
DEFAULT_DATABASE_AGE: str = DatabaseAge.YEARS_2_PLUS.value

# Industry data: 22% reactivation rate with personalized outreach
EXPECTED_RESPONSE_RATE: float = 0.22
BEST_CASE_RESPONSE_RATE: float = 0.35

# Share of past customers still winnable, by recency
PAST_CUSTOMER_WINNABLE_SHARES: Dict[str, float] = {
    TimeSinceLastPurchase.MONTHS_3_6.value: 0.60,
    TimeSinceLastPurchase.MONTHS_6_12.value: 0.45,
    TimeSinceLastPurchase.YEARS_1_2.value: 0.30,
    TimeSinceLastPurchase.YEARS_2_PLUS.value: 0.15,
}

DEFAULT_TIME_SINCE_LAST_PURCHASE: str = TimeSinceLastPurchase.YEARS_2_PLUS.value

WIN_BACK_RATE: float = 0.20

# Returning customers spend more per order
RETURN_PURCHASE_BONUS: float = 0.15

CAMPAIGNS_PER_YEAR: Dict[str, float] = {
    ReengagementFrequency.MONTHLY.value: 12,
    ReengagementFrequency.QUARTERLY.value: 4,
    ReengagementFrequency.TWICE_A_YEAR.value: 2,
    ReengagementFrequency.ONCE_A_YEAR.value: 1,
    ReengagementFrequency.RARELY.value: 0.5,
}

RECOMMENDED_FREQUENCY: str = ReengagementFrequency.QUARTERLY.value

# Quick-win score: base for any opportunity plus contact-volume and untouched-share components
QUICK_WIN_BASE_SCORE: int = 40
QUICK_WIN_CONTACT_WEIGHT: int = 30
QUICK_WIN_CONTACT_SATURATION: int = 500
QUICK_WIN_UNTOUCHED_WEIGHT: int = 30


# =============================================================================
# Reactivation Campaign Economics
# =============================================================================

DEFAULT_CAMPAIGN_INVESTMENT: float = 2000
MIN_CAMPAIGN_INVESTMENT: float = 500
MAX_CAMPAIGN_INVESTMENT: float = 10000

DEFAULT_ROI_RESPONSE_RATE_PCT: float = 22
MIN_ROI_RESPONSE_RATE_PCT: float = 15
MAX_ROI_RESPONSE_RATE_PCT: float = 35


# =============================================================================
# Scenarios
# =============================================================================

# Share of the missed-call leak recovered once calls are captured
MISSED_CALL_CAPTURE_RECOVERY: float = 0.65
