"""Reduce per-unit results into scan-wide statistics."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import AnalysisResult, ScanStatistics, Severity


def aggregate_statistics(
    results: Iterable[AnalysisResult], duration_ms: float = 0.0
) -> ScanStatistics:
    """Pure reduction of analysis results.

    An empty input gives all-zero statistics. ``issues_by_severity`` always
    lists every severity level (lowest first), even at zero.
    """
    total_units = 0
    total_issues = 0
    total_recommendations = 0
    thread_safe = 0
    failed = 0
    classes = 0
    by_severity: Counter[str] = Counter()
    by_category: Counter[str] = Counter()

    for result in results:
        total_units += 1
        total_issues += len(result.issues)
        total_recommendations += len(result.recommendations)
        classes += result.analyzed_classes
        if result.thread_safe:
            thread_safe += 1
        if result.has_errors:
            failed += 1
        for issue in result.issues:
            by_severity[issue.severity.name] += 1
            by_category[issue.category.value] += 1

    return ScanStatistics(
        total_units=total_units,
        total_issues=total_issues,
        total_recommendations=total_recommendations,
        thread_safe_count=thread_safe,
        problematic_count=total_units - thread_safe,
        failed_units=failed,
        analyzed_classes=classes,
        issues_by_severity={level.name: by_severity.get(level.name, 0) for level in Severity},
        issues_by_category=dict(sorted(by_category.items())),
        duration_ms=duration_ms,
    )
