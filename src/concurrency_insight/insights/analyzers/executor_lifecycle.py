"""EXECUTOR_NOT_SHUTDOWN: executor fields in classes that never shut them down.

Severity: MEDIUM
Gate: the unit must import something executor-related from the
concurrency packages.
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import is_executor_import, is_executor_type, is_lifecycle_method


class ExecutorLifecycleAnalyzer:
    """Detects executors whose owning class has no shutdown/close method."""

    name = "executor_lifecycle"
    category = IssueCategory.EXECUTOR_NOT_SHUTDOWN
    severity = Severity.MEDIUM

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        if not any(is_executor_import(imp) for imp in unit.thread_related_imports):
            return []

        if any(is_lifecycle_method(m) for m in cls.methods):
            return []

        return [
            ConcurrencyIssue(
                category=self.category,
                class_name=cls.name,
                severity=self.severity,
                line=f.line,
                file_path=unit.path,
                description=(
                    f"{f.declared_type} '{f.name}' should be properly shutdown to prevent "
                    f"resource leaks"
                ),
                code_snippet=snippet_for(unit, f.line),
                suggested_fix="Add shutdown() call in cleanup method or implement AutoCloseable",
            )
            for f in cls.fields
            if is_executor_type(f.declared_type)
        ]
