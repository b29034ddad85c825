"""Config – env-based settings and their errors."""

from xerr.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    XerrSettings,
    configure,
    get_settings,
)
from xerr.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "XerrSettings",
    "configure",
    "get_settings",
]
