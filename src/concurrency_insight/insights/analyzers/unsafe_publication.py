"""UNSAFE_PUBLICATION: static fields that are neither final nor volatile.

Severity: MEDIUM. Applies to any type, independently of the shared
mutable state rule.
"""

from __future__ import annotations

from ...scanning.models import ClassDescriptor, FieldDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import is_collection_like_type, is_unsafely_published


class UnsafePublicationAnalyzer:
    name = "unsafe_publication"
    category = IssueCategory.UNSAFE_PUBLICATION
    severity = Severity.MEDIUM

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        issues: list[ConcurrencyIssue] = []

        for f in cls.fields:
            if not is_unsafely_published(f):
                continue

            issues.append(
                ConcurrencyIssue(
                    category=self.category,
                    class_name=cls.name,
                    severity=self.severity,
                    line=f.line,
                    file_path=unit.path,
                    description=(
                        f"Static field '{f.name}' is not final or volatile, which may lead "
                        f"to unsafe publication. Consider making it final or volatile for "
                        f"thread safety."
                    ),
                    code_snippet=snippet_for(unit, f.line),
                    suggested_fix=self._build_fix(f),
                )
            )

        return issues

    @staticmethod
    def _build_fix(f: FieldDescriptor) -> str:
        modifier = "final" if is_collection_like_type(f.declared_type) else "volatile"
        return f"Make the field final or volatile: {modifier} {f.declared_type} {f.name}"
