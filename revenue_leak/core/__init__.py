"""
Core infrastructure package for the Revenue Leak service.

Provides:
- Configuration management via pydantic-settings
- FastAPI dependency injection utilities

Re-exports key components so other modules can write:

    from revenue_leak.core import get_settings, SettingsDep
"""

from revenue_leak.core.config import Settings, get_settings
from revenue_leak.core.dependencies import SettingsDep, get_settings_dependency

__all__ = [
    'Settings',
    'get_settings',
    'get_settings_dependency',
    'SettingsDep',
]
