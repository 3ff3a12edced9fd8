"""Config settings – 12-factor env-based configuration."""
from mics_hooks.config.settings.base import Settings
from mics_hooks.config.settings.hook import HookSettings
from mics_hooks.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "HookSettings", "Settings", "SettingsLoader"]
