"""
Configuration module.

Exports:
    settings: Application settings instance
    get_settings: Function to get settings (for dependency injection)
    EngineConfig: Explicit configuration passed to engine functions
    get_engine_config: EngineConfig built from settings
"""

from config.settings import settings, get_settings, get_engine_config, Settings
from config.engine import (
    EngineConfig,
    DEFAULT_ALERT_THRESHOLD,
    DEFAULT_PALLET_CAPACITY,
)

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "Settings",

    # Engine
    "EngineConfig",
    "get_engine_config",
    "DEFAULT_ALERT_THRESHOLD",
    "DEFAULT_PALLET_CAPACITY",
]
