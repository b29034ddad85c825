"""Config settings – env-based configuration."""
from xerr.config.settings.base import Settings
from xerr.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from xerr.config.settings.runtime import XerrSettings, configure, get_settings

__all__ = [
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "XerrSettings",
    "configure",
    "get_settings",
]
