"""
Revenue Leak Engine Package.

Deterministic calculation engine that converts a service business's
operational metrics into ranked monthly revenue-leak estimates, a live
cockpit exposure figure, and a dormant-lead / past-customer reactivation
opportunity, served over FastAPI.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration and dependencies
    - models: Pydantic schemas and enums
    - services: Calculation engine (pure functions)
"""

__version__ = "1.0.0"
