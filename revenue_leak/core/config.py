"""
Settings and environment management module for the Revenue Leak service.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development (no variable is required)
- Singleton pattern via @lru_cache for efficient access
- Cockpit disqualification thresholds overridable per deployment

Environment Variables:
- APP_NAME: Display name returned by the root endpoint
- LOG_LEVEL: Root logging level (default: INFO)
- CORS_ORIGINS: JSON list of allowed front-end origins

Cockpit Qualification Defaults:
- cockpit_min_inquiries: 10 (weekly inquiries below this disqualify)
- cockpit_min_missed_per_10: 2 (missed ratio below this disqualifies)
- cockpit_min_avg_ticket: 300 (average ticket below this disqualifies)
- cockpit_min_monthly_exposure: 3000 (conservative monthly exposure below this disqualifies)

Usage:
    from revenue_leak.core.config import get_settings

    settings = get_settings()
    min_inquiries = settings.cockpit_min_inquiries
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Service display name.
        log_level: Logging level name passed to logging.basicConfig.
        cors_origins: Origins allowed by the CORS middleware.
        cockpit_min_inquiries: Minimum weekly inquiries for a qualified cockpit call.
        cockpit_min_missed_per_10: Minimum missed-out-of-10 ratio for qualification.
        cockpit_min_avg_ticket: Minimum average ticket in dollars for qualification.
        cockpit_min_monthly_exposure: Minimum conservative monthly exposure in dollars.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Service
    # =========================================================================

    app_name: str = 'Revenue Leak API'

    log_level: str = 'INFO'

    # Vite dev server and preview ports of the calculator front-end
    cors_origins: List[str] = [
        'http://localhost:5173',
        'http://127.0.0.1:5173',
        'http://localhost:8080',
    ]

    # =========================================================================
    # Cockpit Disqualification Thresholds
    # Evaluated against the conservative (floor) exposure only.
    # =========================================================================

    # inquiries < cockpit_min_inquiries => DISQUALIFIED
    cockpit_min_inquiries: float = 10

    # missedPer10 < cockpit_min_missed_per_10 => DISQUALIFIED
    cockpit_min_missed_per_10: float = 2

    # avgTicket < cockpit_min_avg_ticket => DISQUALIFIED
    cockpit_min_avg_ticket: float = 300

    # conservative monthly exposure < cockpit_min_monthly_exposure => DISQUALIFIED
    cockpit_min_monthly_exposure: float = 3000


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings: The cached settings instance.

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
