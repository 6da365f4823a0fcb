"""POTENTIAL_RACE_CONDITION: unsynchronized methods that look like mutators.

Severity: HIGH

Only the signature is inspected: a non-synchronized method with a void
return type, or whose name starts with set/add/remove/put. Method bodies
are never looked at.
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import is_mutation_method


class RaceConditionAnalyzer:
    """Detects methods that appear to modify shared state without locking."""

    name = "race_condition"
    category = IssueCategory.POTENTIAL_RACE_CONDITION
    severity = Severity.HIGH

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        issues: list[ConcurrencyIssue] = []

        for m in cls.methods:
            if m.is_synchronized or not is_mutation_method(m):
                continue

            issues.append(
                ConcurrencyIssue(
                    category=self.category,
                    class_name=cls.name,
                    method_name=m.name,
                    severity=self.severity,
                    line=m.line,
                    file_path=unit.path,
                    description=(
                        f"Method '{m.name}' appears to modify shared state without proper "
                        f"synchronization. This could lead to race conditions in "
                        f"multi-threaded environments."
                    ),
                    code_snippet=snippet_for(unit, m.line),
                    suggested_fix=f"Add synchronization: synchronized {m.return_type} {m.name}",
                )
            )

        return issues
