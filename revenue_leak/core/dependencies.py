"""
FastAPI dependency injection module for the Revenue Leak service.

The calculation engine owns no resources, so the only injected dependency is
the settings singleton. Endpoints receive it through SettingsDep, which lets
tests swap thresholds with:

    app.dependency_overrides[get_settings_dependency] = lambda: custom_settings
"""

from typing import Annotated

from fastapi import Depends

from revenue_leak.core.config import Settings, get_settings


def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    Thin wrapper around get_settings() so FastAPI's dependency override
    mechanism can replace it in tests.
    """
    return get_settings()


# Usage: async def endpoint(settings: SettingsDep)
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
