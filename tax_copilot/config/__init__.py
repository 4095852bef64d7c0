"""Configuration package."""

from tax_copilot.config.settings import (
    AppSettings,
    LedgerConfig,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "LedgerConfig",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
