"""
Display configuration management for datepick.

Public API:
    DisplayConfig: Display and output settings edited from the picker
    SettingsPersistence: JSON storage with fallback to defaults
    SettingsError: Base exception for settings-related errors
    SettingsValidationError: Settings validation error
    SettingsPersistenceError: Settings persistence error
"""

from .exceptions import SettingsError, SettingsPersistenceError, SettingsValidationError
from .models import COLOR_ROLES, DEFAULT_COLORS, DisplayConfig
from .persistence import SettingsPersistence

__all__ = [
    "COLOR_ROLES",
    "DEFAULT_COLORS",
    "DisplayConfig",
    "SettingsError",
    "SettingsPersistence",
    "SettingsPersistenceError",
    "SettingsValidationError",
]
