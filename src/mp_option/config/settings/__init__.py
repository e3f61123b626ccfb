"""Config settings – env-based configuration."""
from mp_option.config.settings.base import LoggingSettings, Settings
from mp_option.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
