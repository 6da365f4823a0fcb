"""Data models for the concurrency analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Optional


class Severity(IntEnum):
    """Totally ordered issue severity: LOW < MEDIUM < HIGH < CRITICAL."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class IssueCategory(Enum):
    SHARED_MUTABLE_STATE = "SHARED_MUTABLE_STATE"
    UNSAFE_PUBLICATION = "UNSAFE_PUBLICATION"
    POTENTIAL_RACE_CONDITION = "POTENTIAL_RACE_CONDITION"
    POTENTIAL_DEADLOCK = "POTENTIAL_DEADLOCK"
    UNSAFE_COLLECTION = "UNSAFE_COLLECTION"
    LEGACY_COLLECTION = "LEGACY_COLLECTION"
    SYNCHRONIZED_WRAPPER = "SYNCHRONIZED_WRAPPER"
    EXECUTOR_NOT_SHUTDOWN = "EXECUTOR_NOT_SHUTDOWN"
    ATOMIC_OPPORTUNITY = "ATOMIC_OPPORTUNITY"
    LOCK_USAGE_PATTERN = "LOCK_USAGE_PATTERN"
    # Synthetic: an analyzer failed on a class
    ANALYZER_ERROR = "ANALYZER_ERROR"


# Severities at or above this make a unit not thread-safe.
UNSAFE_SEVERITY = Severity.HIGH


def max_severity(issues: Iterable[ConcurrencyIssue]) -> Optional[Severity]:
    """Highest severity present, or None for an empty issue list."""
    return max((issue.severity for issue in issues), default=None)


def is_thread_safe(issues: Iterable[ConcurrencyIssue]) -> bool:
    """The thread-safety verdict.

    True iff no issue is HIGH or CRITICAL. An empty list, or one holding
    only LOW/MEDIUM issues, is thread-safe.
    """
    worst = max_severity(issues)
    return worst is None or worst < UNSAFE_SEVERITY


@dataclass(frozen=True)
class ConcurrencyIssue:
    category: IssueCategory
    class_name: str
    severity: Severity
    description: str
    suggested_fix: str = ""
    method_name: Optional[str] = None
    line: int = 0  # 0 = not localizable
    code_snippet: str = ""
    file_path: str = ""
    confidence: float = 1.0  # 0.0 for synthetic analyzer-failure issues

    def __post_init__(self) -> None:
        if not isinstance(self.category, IssueCategory):
            raise ValueError(f"Unknown issue category: {self.category!r}")
        if not isinstance(self.severity, Severity):
            raise ValueError(f"Unknown issue severity: {self.severity!r}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {self.confidence}")

    @property
    def type(self) -> str:
        """Category name as a plain string."""
        return self.category.value

    @property
    def location(self) -> str:
        where = self.class_name
        if self.method_name:
            where = f"{where}.{self.method_name}"
        if self.line > 0:
            where = f"{where}:{self.line}"
        return where


@dataclass(frozen=True)
class AnalysisResult:
    """Merged outcome for one source unit.

    ``thread_safe`` is derived, never passed in: ``is_thread_safe(issues)``
    for analyzed units, always False when ``has_errors`` is set.
    """

    file_path: str
    issues: tuple[ConcurrencyIssue, ...] = ()
    thread_safe: bool = field(init=False, default=True)
    analyzed_classes: int = 0
    has_errors: bool = False
    error_message: Optional[str] = None
    recommendations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.issues, tuple):
            object.__setattr__(self, "issues", tuple(self.issues))
        if not isinstance(self.recommendations, tuple):
            object.__setattr__(self, "recommendations", tuple(self.recommendations))
        # A unit we could not analyze is never reported thread-safe
        verdict = False if self.has_errors else is_thread_safe(self.issues)
        object.__setattr__(self, "thread_safe", verdict)

    @classmethod
    def from_issues(
        cls,
        file_path: str,
        issues: Iterable[ConcurrencyIssue],
        analyzed_classes: int,
    ) -> AnalysisResult:
        issues = tuple(issues)
        return cls(
            file_path=file_path,
            issues=issues,
            analyzed_classes=analyzed_classes,
        )

    @classmethod
    def failed(cls, file_path: str, error_message: str) -> AnalysisResult:
        return cls(
            file_path=file_path,
            issues=(),
            analyzed_classes=0,
            has_errors=True,
            error_message=error_message,
        )

    @property
    def max_severity(self) -> Optional[Severity]:
        return max_severity(self.issues)

    def issues_at_least(self, severity: Severity) -> list[ConcurrencyIssue]:
        return [issue for issue in self.issues if issue.severity >= severity]

    def issues_for_class(self, class_name: str) -> list[ConcurrencyIssue]:
        return [issue for issue in self.issues if issue.class_name == class_name]


@dataclass(frozen=True)
class ScanStatistics:
    total_units: int = 0
    total_issues: int = 0
    total_recommendations: int = 0
    thread_safe_count: int = 0
    problematic_count: int = 0
    failed_units: int = 0
    analyzed_classes: int = 0
    issues_by_severity: dict[str, int] = field(default_factory=dict)
    issues_by_category: dict[str, int] = field(default_factory=dict)
    duration_ms: float = 0.0

    def __str__(self) -> str:
        return (
            f"ScanStatistics(units={self.total_units}, issues={self.total_issues}, "
            f"recommendations={self.total_recommendations}, threadSafe={self.thread_safe_count}, "
            f"problematic={self.problematic_count}, failed={self.failed_units})"
        )
