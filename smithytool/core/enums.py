from enum import Enum

from .exceptions import ConfigurationError


class Severity(str, Enum):
    """Validation severities understood by the Smithy CLI, lowest first"""
    NOTE = "NOTE"
    WARNING = "WARNING"
    DANGER = "DANGER"
    ERROR = "ERROR"

    @classmethod
    def from_value(cls, value) -> 'Severity':
        """Parse a severity name, case-insensitive"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ConfigurationError(f"Invalid severity '{value}'. Expected one of: {allowed}")


class LogLevel(str, Enum):
    QUIET = "QUIET"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @classmethod
    def from_value(cls, value) -> 'LogLevel':
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            allowed = ", ".join(level.value for level in cls)
            raise ConfigurationError(f"Invalid log level '{value}'. Expected one of: {allowed}")
