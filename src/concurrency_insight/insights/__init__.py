"""Concurrency analysis engine: analyzers, orchestration and statistics."""

from .analyzers import get_default_analyzers
from .engine import AnalysisEngine
from .models import (
    AnalysisResult,
    ConcurrencyIssue,
    IssueCategory,
    ScanStatistics,
    Severity,
    is_thread_safe,
    max_severity,
)
from .protocols import ConcurrencyAnalyzer
from .statistics import aggregate_statistics

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "ConcurrencyAnalyzer",
    "ConcurrencyIssue",
    "IssueCategory",
    "ScanStatistics",
    "Severity",
    "aggregate_statistics",
    "get_default_analyzers",
    "is_thread_safe",
    "max_severity",
]
