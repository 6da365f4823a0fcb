"""Configuration exceptions: config sources, values and scan roots."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import ConcurrencyInsightError


class ConfigurationError(ConcurrencyInsightError):
    """Raised when configuration cannot be loaded.

    ``source`` names the config file or environment variable at fault,
    when one is known.
    """

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        details: Optional[Dict[str, str]] = None,
    ):
        details = dict(details or {})
        if source is not None:
            details["source"] = str(source)
        super().__init__(message, details=details)
        self.source = source


class InvalidPathError(ConfigurationError):
    """Raised when the scan root is missing or is not a Java source file."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value fails validation."""

    def __init__(
        self,
        key: str,
        value: Any,
        reason: str,
        source: Optional[Union[str, Path]] = None,
    ):
        super().__init__(
            f"Invalid value for {key}: {value!r} ({reason})",
            source=source,
            details={"key": key, "value": str(value)},
        )
        self.key = key
        self.value = value
        self.reason = reason
