"""LOCK_USAGE_PATTERN: explicit Lock fields.

Severity: MEDIUM
Gate: the unit imports from java.util.concurrent.locks.

One issue per Lock-typed field as a reminder of the lock/try/finally
discipline. final and static do not suppress it.
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import is_lock_import, is_lock_type


class LockUsagePatternAnalyzer:
    name = "lock_usage"
    category = IssueCategory.LOCK_USAGE_PATTERN
    severity = Severity.MEDIUM

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        if not any(is_lock_import(imp) for imp in unit.thread_related_imports):
            return []

        return [
            ConcurrencyIssue(
                category=self.category,
                class_name=cls.name,
                severity=self.severity,
                line=f.line,
                file_path=unit.path,
                description=(
                    f"Ensure {f.declared_type} '{f.name}' is used with proper try-finally pattern"
                ),
                code_snippet=snippet_for(unit, f.line),
                suggested_fix=(
                    f"Use {f.name}.lock(); try {{ ... }} finally {{ {f.name}.unlock(); }} pattern"
                ),
            )
            for f in cls.fields
            if is_lock_type(f.declared_type)
        ]
