'''
Revenue Leak Engine Test Suite

Test Modules:
-------------
- test_normalizer.py: clamping, rounding, bucket fallbacks, record derivations
- test_exposure.py: worked example, clamping, monotonicity
- test_cockpit.py: status classification, threshold boundaries, constraint focus
- test_leaks.py: per-leak formulas and preconditions
- test_reactivation.py: dormant leads, past customers, ROI projection
- test_ranking.py: dense ranks, severity tiers, constraint labels
- test_calculator.py: end-to-end result assembly and missed-call scenario
- test_api.py: HTTP contract through an in-process ASGI client

Running Tests:
--------------
    pip install -e ".[test]"
    pytest revenue_leak/tests -v
'''

__all__ = []
