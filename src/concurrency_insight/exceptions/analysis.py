"""Analysis-related exceptions: file access, parsing, engine failures."""

from pathlib import Path
from typing import Dict, Optional

from .base import ConcurrencyInsightError


class AnalysisError(ConcurrencyInsightError):
    """Base class for analysis-related errors."""

    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when source content cannot be turned into a structural model."""

    def __init__(self, filepath: str, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class EngineError(AnalysisError):
    """Errors that abort a whole scan.

    Distinct from issues found in the analyzed code: an EngineError means
    the scan itself could not be trusted.
    """

    pass


class InvariantViolationError(EngineError):
    """Raised when an input model breaks an invariant the engine relies on."""

    def __init__(
        self,
        reason: str,
        class_name: Optional[str] = None,
        filepath: Optional[str] = None,
    ):
        details: Dict[str, str] = {"reason": reason}
        if class_name is not None:
            details["class_name"] = class_name
        if filepath is not None:
            details["filepath"] = filepath

        super().__init__(f"Invariant violated: {reason}", details=details)
        self.reason = reason
        self.class_name = class_name
        self.filepath = filepath
