"""
Concurrency Insight - rule-based thread-safety analysis for Java sources.

Extracts a structural model of each class (fields, methods, modifiers,
declared types) and runs a fixed set of pattern analyzers over it, producing
located, severity-ranked concurrency issues and a per-file verdict.
"""

__version__ = "0.1.0"

from .api import ScanReport, analyze_sources, scan
from .insights import AnalysisEngine, AnalysisResult, ConcurrencyIssue, ScanStatistics, Severity
from .scanning.models import SourceUnit

__all__ = [
    "scan",  # Main entry point
    "analyze_sources",
    "ScanReport",
    "AnalysisEngine",  # Direct engine access
    "AnalysisResult",
    "ConcurrencyIssue",
    "ScanStatistics",
    "Severity",
    "SourceUnit",
]
