"""Config validation errors."""
from __future__ import annotations

from beaver.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidSinkError(ConfigError):
    """A logger was given ``None`` as its output destination."""
    default_code = "invalid_sink"

    def __init__(self, message: str = "A None value can not be used as output") -> None:
        super().__init__(message)


class LogFileError(ConfigError):
    """The configured log file could not be opened for appending."""
    default_code = "log_file_unavailable"

    def __init__(self, path: str, *, cause: BaseException | None = None) -> None:
        super().__init__(
            f"Log file '{path}' can not be opened",
            detail={"path": path},
            cause=cause,
        )
        self.path = path


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "InvalidSinkError",
    "LogFileError",
    "MissingRequiredSettingError",
]
