"""Exception hierarchy for Concurrency Insight."""

from .analysis import (
    AnalysisError,
    EngineError,
    FileAccessError,
    InvariantViolationError,
    ParsingError,
)
from .base import ConcurrencyInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ConcurrencyInsightError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "EngineError",
    "InvariantViolationError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
