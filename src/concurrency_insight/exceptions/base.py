"""Base exception for Concurrency Insight."""

from typing import Any, Dict, Optional


class ConcurrencyInsightError(Exception):
    """Base exception for all Concurrency Insight errors.

    ``details`` holds structured context (paths, keys, reasons). It is
    appended to ``str()`` and exported by ``to_dict`` for JSON output.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": dict(self.details),
        }
