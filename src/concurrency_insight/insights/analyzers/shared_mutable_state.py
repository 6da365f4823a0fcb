"""SHARED_MUTABLE_STATE: mutable container fields without final/volatile.

Severity: HIGH

A field is flagged when it is neither final nor volatile and its declared
type looks like a non-concurrent container (see
``predicates.is_unsafe_container_type``).
"""

from __future__ import annotations

from ...logging_config import get_logger
from ...scanning.models import ClassDescriptor, FieldDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import ContainerFamily, container_family, is_shared_mutable_field

logger = get_logger(__name__)


class SharedMutableStateAnalyzer:
    """Flags container fields that threads can mutate without coordination."""

    name = "shared_mutable_state"
    category = IssueCategory.SHARED_MUTABLE_STATE
    severity = Severity.HIGH

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        issues = [
            ConcurrencyIssue(
                category=self.category,
                class_name=cls.name,
                severity=self.severity,
                line=f.line,
                file_path=unit.path,
                description=(
                    f"Field '{f.name}' of type '{f.declared_type}' is mutable and not "
                    f"thread-safe. Consider making it final, volatile, or using "
                    f"thread-safe alternatives."
                ),
                code_snippet=snippet_for(unit, f.line),
                suggested_fix=self._build_fix(f),
            )
            for f in cls.fields
            if is_shared_mutable_field(f)
        ]
        logger.debug(f"{cls.name}: {len(issues)} shared mutable state issue(s)")
        return issues

    def _build_fix(self, f: FieldDescriptor) -> str:
        family = container_family(f.declared_type)
        if family is ContainerFamily.MAP:
            return f"Use ConcurrentHashMap: private final ConcurrentHashMap<K, V> {f.name}"
        if family is ContainerFamily.LIST:
            return (
                "Use Collections.synchronizedList() or CopyOnWriteArrayList: "
                f"private final List<T> {f.name} = new CopyOnWriteArrayList<>()"
            )
        if family is ContainerFamily.SET:
            return (
                "Use Collections.synchronizedSet() or ConcurrentHashMap.newKeySet(): "
                f"private final Set<T> {f.name} = ConcurrentHashMap.newKeySet()"
            )
        return (
            "Make field volatile or use proper synchronization: "
            f"volatile {f.declared_type} {f.name}"
        )
