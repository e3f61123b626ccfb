"""Config – 12-factor settings and their validation errors."""

from mp_option.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from mp_option.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
