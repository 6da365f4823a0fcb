"""ATOMIC_OPPORTUNITY: primitive counters that could be atomic.

Severity: LOW
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import atomic_wrapper_for, is_primitive_counter


class AtomicOpportunityAnalyzer:
    name = "atomic_opportunity"
    category = IssueCategory.ATOMIC_OPPORTUNITY
    severity = Severity.LOW

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        issues: list[ConcurrencyIssue] = []

        for f in cls.fields:
            if f.is_volatile or not is_primitive_counter(f):
                continue

            wrapper = atomic_wrapper_for(f.declared_type)
            fix = (
                f"Consider using {wrapper}"
                if wrapper
                else "Consider using appropriate atomic type"
            )
            issues.append(
                ConcurrencyIssue(
                    category=self.category,
                    class_name=cls.name,
                    severity=self.severity,
                    line=f.line,
                    file_path=unit.path,
                    description=(
                        f"Field '{f.name}' could benefit from atomic operations for thread "
                        f"safety"
                    ),
                    code_snippet=snippet_for(unit, f.line),
                    suggested_fix=fix,
                )
            )

        return issues
