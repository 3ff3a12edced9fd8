"""Config – environment-driven settings and their validation errors."""
from mics_hooks.config.settings import EnvSettingsLoader, HookSettings, Settings, SettingsLoader
from mics_hooks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HookSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
