"""Config – 12-factor settings, loaders and configuration errors."""

from beaver.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from beaver.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    InvalidSinkError,
    LogFileError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "InvalidSinkError",
    "LogFileError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
