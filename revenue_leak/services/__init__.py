"""
Revenue Leak Services Module

Business logic for the revenue leak calculation engine. Every service is a
set of stateless, pure functions: same input, same output, no I/O.

Services:
- normalizer: clamps and defaults raw form input (NormalizedInput)
- exposure: base missed-call exposure formula
- cockpit: live setter cockpit qualification
- leaks: one computation per operational leak type
- reactivation: dormant-lead and past-customer opportunity, campaign ROI
- ranking: rank / severity / constraint label assignment
- calculator: end-to-end wizard result assembly
- scenarios: what-if projections over a finished result

All services are consumed by the API layer (revenue_leak/api/).
"""

# =============================================================================
# Normalizer Exports
# =============================================================================

from revenue_leak.services.normalizer import (
    NormalizedInput,
    clamp,
    get_industry_default_close_rate,
    loss_range,
    normalize_record,
    per10_to_rate,
    percent_to_rate,
    round_half_up,
)

# =============================================================================
# Exposure & Cockpit Exports
# =============================================================================

from revenue_leak.services.exposure import (
    compute_exposure,
    compute_full_exposure,
)

from revenue_leak.services.cockpit import (
    calculate_cockpit_result,
    determine_status,
    evaluate_disqualification,
    identify_primary_constraint,
)

# =============================================================================
# Leak Catalog, Reactivation and Ranking Exports
# =============================================================================

from revenue_leak.services.leaks import (
    LEAK_CALCULATORS,
    build_leak,
    calculate_operational_leaks,
)

from revenue_leak.services.reactivation import (
    calculate_dormant_leads,
    calculate_past_customers,
    calculate_reactivation,
    project_reactivation_roi,
)

from revenue_leak.services.ranking import (
    determine_severity,
    rank_leaks,
)

# =============================================================================
# Result Assembly Exports
# =============================================================================

from revenue_leak.services.calculator import (
    calculate_leaks,
    project_campaign_roi,
)

from revenue_leak.services.scenarios import simulate_missed_call_capture


__all__ = [
    # Normalizer
    "NormalizedInput",
    "clamp",
    "get_industry_default_close_rate",
    "loss_range",
    "normalize_record",
    "per10_to_rate",
    "percent_to_rate",
    "round_half_up",
    # Exposure & cockpit
    "compute_exposure",
    "compute_full_exposure",
    "calculate_cockpit_result",
    "determine_status",
    "evaluate_disqualification",
    "identify_primary_constraint",
    # Leak catalog
    "LEAK_CALCULATORS",
    "build_leak",
    "calculate_operational_leaks",
    # Reactivation
    "calculate_dormant_leads",
    "calculate_past_customers",
    "calculate_reactivation",
    "project_reactivation_roi",
    # Ranking
    "determine_severity",
    "rank_leaks",
    # Assembly
    "calculate_leaks",
    "project_campaign_roi",
    "simulate_missed_call_capture",
]
