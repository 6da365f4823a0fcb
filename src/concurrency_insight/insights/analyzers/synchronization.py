"""POTENTIAL_DEADLOCK: classes with many synchronized methods.

Scope: CLASS (one issue per class, never per method)
Severity: HIGH

A coarse proxy for lock contention and deadlock risk. No lock graph is
built; the count of synchronized methods is compared to a threshold.
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for

DEFAULT_SYNCHRONIZED_METHOD_THRESHOLD = 3


class SynchronizationAnalyzer:
    """Flags classes whose synchronized method count exceeds the threshold."""

    name = "synchronization"
    category = IssueCategory.POTENTIAL_DEADLOCK
    severity = Severity.HIGH

    def __init__(self, threshold: int = DEFAULT_SYNCHRONIZED_METHOD_THRESHOLD):
        self.threshold = threshold

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        synchronized = cls.synchronized_methods
        if len(synchronized) <= self.threshold:
            return []

        names = ", ".join(m.name for m in synchronized)
        return [
            ConcurrencyIssue(
                category=self.category,
                class_name=cls.name,
                severity=self.severity,
                line=cls.line,
                file_path=unit.path,
                description=(
                    f"Class has {len(synchronized)} synchronized methods ({names}) which may "
                    f"increase deadlock risk"
                ),
                code_snippet=snippet_for(unit, cls.line),
                suggested_fix=(
                    "Reduce the synchronized surface: guard only the critical sections with "
                    "private lock objects, or move shared state into concurrent types"
                ),
            )
        ]
