"""Config validation errors."""
from beaver.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    InvalidSinkError,
    LogFileError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "InvalidSinkError",
    "LogFileError",
    "MissingRequiredSettingError",
]
