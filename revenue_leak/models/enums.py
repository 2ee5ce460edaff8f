"""
Enumeration definitions for the Revenue Leak calculation service.

This module provides type-safe enumeration values matching the option values
used by the calculator wizard and the setter cockpit.

All enums inherit from both `str` and `Enum` to ensure JSON serialization
compatibility with Pydantic models, so responses carry the plain string values
the front-end already understands.
"""

from enum import Enum


class CockpitStatus(str, Enum):
    """
    Qualification status of a live cockpit evaluation.

    Status is always recomputed from the latest input record:
    - INCOMPLETE: one of inquiries / missed ratio / avg ticket is zero
    - DISQUALIFIED: conservative exposure fails a disqualification predicate
    - QUALIFIED: all predicates pass
    - BOOKED: a scheduling action occurred (sticky, overrides QUALIFIED/DISQUALIFIED)
    """
    INCOMPLETE = "INCOMPLETE"
    DISQUALIFIED = "DISQUALIFIED"
    QUALIFIED = "QUALIFIED"
    BOOKED = "BOOKED"


class ExposureMode(str, Enum):
    """
    Which exposure computation the cockpit surfaces.

    - floor: conservative exposure using the user-set close rate
    - full: uncapped exposure with close rate fixed at 1.0
    """
    FLOOR = "floor"
    FULL = "full"


class LeakType(str, Enum):
    """
    Revenue leak categories produced by the leak catalog.

    Values are the kebab-case identifiers used by the results views
    (ConstraintSummaryCard WHY_IT_MATTERS / FIX_COMPLEXITY keys).
    """
    MISSED_CALLS = "missed-calls"
    SLOW_RESPONSE = "slow-response"
    NO_FOLLOW_UP = "no-follow-up"
    NO_SHOW = "no-show"
    UNQUALIFIED_LEADS = "unqualified-leads"
    AFTER_HOURS = "after-hours"
    HOLD_TIME = "hold-time"
    REACTIVATION = "reactivation"


class Severity(str, Enum):
    """
    Four-tier severity assigned by the ranking aggregator.

    Severity is derived from the leak's share of total operational monthly loss.
    Rank-based highlighting (top-2) is a presentation concern and not modeled here.
    """
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FixComplexity(str, Enum):
    """Estimated implementation effort for fixing a leak."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ResponseTimeBucket(str, Enum):
    """Average lead response time options (Step3ResponseTime)."""
    UNDER_15_MIN = "<15min"
    MIN_15_60 = "15-60min"
    HRS_1_4 = "1-4hrs"
    HRS_4_24 = "4-24hrs"
    OVER_24_HRS = ">24hrs"


class MissedCallRateBucket(str, Enum):
    """Share of inbound calls that go unanswered (Step4Operations)."""
    PCT_0_10 = "0-10%"
    PCT_10_20 = "10-20%"
    PCT_20_30 = "20-30%"
    PCT_30_40 = "30-40%"
    PCT_40_PLUS = "40%+"
    UNKNOWN = "unknown"


class DatabaseAge(str, Enum):
    """Age of the dormant-lead database (Step7Reactivation)."""
    MONTHS_0_3 = "0-3months"
    MONTHS_3_6 = "3-6months"
    MONTHS_6_12 = "6-12months"
    YEARS_1_2 = "1-2years"
    YEARS_2_PLUS = "2+years"


class TimeSinceLastPurchase(str, Enum):
    """Average time since a past customer last purchased."""
    MONTHS_3_6 = "3-6months"
    MONTHS_6_12 = "6-12months"
    YEARS_1_2 = "1-2years"
    YEARS_2_PLUS = "2+years"


class ReengagementFrequency(str, Enum):
    """How often the business runs re-engagement campaigns."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    TWICE_A_YEAR = "twice-a-year"
    ONCE_A_YEAR = "once-a-year"
    RARELY = "rarely"
