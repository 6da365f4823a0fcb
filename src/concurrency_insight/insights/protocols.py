"""Protocol for concurrency analyzer plugins."""

from typing import Protocol, runtime_checkable

from ..scanning.models import ClassDescriptor, SourceUnit
from .models import ConcurrencyIssue


@runtime_checkable
class ConcurrencyAnalyzer(Protocol):
    """Analyzers inspect one class of one unit and return issues.

    Implementations hold no mutable state and never modify their inputs,
    so a single instance can serve concurrent scans.
    """

    name: str

    def analyze(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]: ...
