"""Analyzer implementations: each inspects one class and returns issues.

Registration order is part of the output contract: the engine concatenates
issues in exactly this order for every class.

1. shared_mutable_state
2. unsafe_publication
3. race_condition
4. synchronization
5. concurrent_collections
6. executor_lifecycle
7. atomic_opportunity
8. lock_usage
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .atomic_opportunity import AtomicOpportunityAnalyzer
from .concurrent_collections import ConcurrentCollectionsAnalyzer
from .executor_lifecycle import ExecutorLifecycleAnalyzer
from .lock_usage import LockUsagePatternAnalyzer
from .race_condition import RaceConditionAnalyzer
from .shared_mutable_state import SharedMutableStateAnalyzer
from .synchronization import DEFAULT_SYNCHRONIZED_METHOD_THRESHOLD, SynchronizationAnalyzer
from .unsafe_publication import UnsafePublicationAnalyzer

if TYPE_CHECKING:
    from ...config import AnalysisConfig
    from ..protocols import ConcurrencyAnalyzer


def get_default_analyzers(config: Optional[AnalysisConfig] = None) -> list[ConcurrencyAnalyzer]:
    """Return fresh instances of every analyzer in registration order."""
    threshold = (
        config.synchronized_method_threshold
        if config is not None
        else DEFAULT_SYNCHRONIZED_METHOD_THRESHOLD
    )
    return [
        SharedMutableStateAnalyzer(),
        UnsafePublicationAnalyzer(),
        RaceConditionAnalyzer(),
        SynchronizationAnalyzer(threshold=threshold),
        ConcurrentCollectionsAnalyzer(),
        ExecutorLifecycleAnalyzer(),
        AtomicOpportunityAnalyzer(),
        LockUsagePatternAnalyzer(),
    ]


__all__ = [
    "AtomicOpportunityAnalyzer",
    "ConcurrentCollectionsAnalyzer",
    "ExecutorLifecycleAnalyzer",
    "LockUsagePatternAnalyzer",
    "RaceConditionAnalyzer",
    "SharedMutableStateAnalyzer",
    "SynchronizationAnalyzer",
    "UnsafePublicationAnalyzer",
    "get_default_analyzers",
]
