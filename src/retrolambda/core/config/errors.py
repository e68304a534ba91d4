"""
Exceptions raised while resolving configuration values.

None of these are caught inside the configuration layer. They propagate to
the entry point, which decides whether to print the usage text and stop.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class ConfigError(Exception):
    """Base class for configuration failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the configuration error.

        Args:
            message: Error message
            context: Structured details about the failing setting
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MissingRequiredParameter(ConfigError, ValueError):
    """A required property and all of its alternatives are absent."""

    def __init__(self, key: str):
        super().__init__(f"Missing required property: {key}", {"key": key})
        self.key = key


class InvalidFormat(ConfigError, ValueError):
    """A property is present but cannot be parsed as its expected type."""

    def __init__(self, key: str, raw_value: str):
        super().__init__(
            f"Invalid value for property {key}: {raw_value!r}",
            {"key": key, "raw_value": raw_value},
        )
        self.key = key
        self.raw_value = raw_value


class IOFailure(ConfigError):
    """A list file referenced by a property could not be read."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        super().__init__(
            f"Failed to read {path}", {"path": str(path), "cause": str(cause)}
        )
        self.path = Path(path)
        self.cause = cause
