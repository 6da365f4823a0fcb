"""Collection-type usage: unsafe, legacy and synchronized-wrapper collections.

Checked per field, first match wins, at most one issue per field:

1. Known concurrent collections (ConcurrentHashMap, CopyOnWriteArrayList,
   blocking queues, skip lists...) are skipped.
2. LEGACY_COLLECTION (LOW): Vector/Hashtable. Flagged even when final,
   the type itself is the problem.
3. SYNCHRONIZED_WRAPPER (LOW): Collections.synchronizedXxx() wrappers.
   Individual calls are safe, iteration and check-then-act are not.
4. UNSAFE_COLLECTION on non-final fields. HashMap/HashSet are HIGH since
   concurrent writers can corrupt the hash table; ArrayList, TreeMap,
   TreeSet and LinkedList are MEDIUM.
"""

from __future__ import annotations

from typing import Optional

from ...scanning.models import ClassDescriptor, FieldDescriptor, SourceUnit
from ..models import ConcurrencyIssue, IssueCategory, Severity
from .helpers import snippet_for
from .predicates import (
    is_safe_collection_type,
    is_synchronized_wrapper_type,
    legacy_collection_name,
    unsafe_collection_name,
)

_UNSAFE_SEVERITY = {
    "HashMap": Severity.HIGH,
    "HashSet": Severity.HIGH,
    "ArrayList": Severity.MEDIUM,
    "TreeMap": Severity.MEDIUM,
    "TreeSet": Severity.MEDIUM,
    "LinkedList": Severity.MEDIUM,
}

_SAFE_ALTERNATIVES = {
    "HashMap": "Use ConcurrentHashMap instead",
    "HashSet": "Use ConcurrentHashMap.newKeySet() or Collections.synchronizedSet()",
    "ArrayList": "Use CopyOnWriteArrayList or Collections.synchronizedList()",
    "TreeMap": "Use ConcurrentSkipListMap for sorted concurrent map",
    "TreeSet": "Use ConcurrentSkipListSet for sorted concurrent set",
    "LinkedList": "Use ConcurrentLinkedQueue for concurrent queue operations",
    "Vector": "Use CopyOnWriteArrayList or Collections.synchronizedList() instead of legacy Vector",
    "Hashtable": "Use ConcurrentHashMap instead of legacy Hashtable",
}


class ConcurrentCollectionsAnalyzer:
    """Checks collection fields against concurrent alternatives."""

    name = "concurrent_collections"

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        issues: list[ConcurrencyIssue] = []
        for f in cls.fields:
            issue = self._check_field(unit, cls, f)
            if issue is not None:
                issues.append(issue)
        return issues

    def _check_field(
        self, unit: SourceUnit, cls: ClassDescriptor, f: FieldDescriptor
    ) -> Optional[ConcurrencyIssue]:
        type_name = f.declared_type

        if is_safe_collection_type(type_name):
            return None

        legacy = legacy_collection_name(type_name)
        if legacy is not None:
            return self._issue(
                unit,
                cls,
                f,
                IssueCategory.LEGACY_COLLECTION,
                Severity.LOW,
                description=(
                    f"Field '{f.name}' uses legacy {legacy}. Every call takes the same "
                    f"monitor, compound actions are still unsafe, and concurrent "
                    f"collections perform better."
                ),
                fix=_SAFE_ALTERNATIVES[legacy],
            )

        if is_synchronized_wrapper_type(type_name):
            return self._issue(
                unit,
                cls,
                f,
                IssueCategory.SYNCHRONIZED_WRAPPER,
                Severity.LOW,
                description=(
                    f"Field '{f.name}' is a synchronized wrapper ({type_name}). Iteration "
                    f"and check-then-act sequences still need manual locking."
                ),
                fix=(
                    f"Hold synchronized ({f.name}) {{ ... }} while iterating, or switch to "
                    f"a concurrent collection"
                ),
            )

        if f.is_final:
            return None

        unsafe = unsafe_collection_name(type_name)
        if unsafe is None:
            return None

        return self._issue(
            unit,
            cls,
            f,
            IssueCategory.UNSAFE_COLLECTION,
            _UNSAFE_SEVERITY[unsafe],
            description=(
                f"Field '{f.name}' uses {unsafe} which is not thread-safe. Consider using "
                f"concurrent alternatives."
            ),
            fix=_SAFE_ALTERNATIVES[unsafe],
        )

    @staticmethod
    def _issue(
        unit: SourceUnit,
        cls: ClassDescriptor,
        f: FieldDescriptor,
        category: IssueCategory,
        severity: Severity,
        description: str,
        fix: str,
    ) -> ConcurrencyIssue:
        return ConcurrencyIssue(
            category=category,
            class_name=cls.name,
            severity=severity,
            line=f.line,
            file_path=unit.path,
            description=description,
            code_snippet=snippet_for(unit, f.line),
            suggested_fix=fix,
        )
