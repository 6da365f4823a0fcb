"""JSON-ready views of results and statistics.

Enums become their names, tuples become lists. Output is consumed by the
CLI ``--json`` mode and by downstream report or recommendation tools.
"""

from __future__ import annotations

from typing import Any, Iterable

from .models import AnalysisResult, ConcurrencyIssue, ScanStatistics


def issue_to_dict(issue: ConcurrencyIssue) -> dict[str, Any]:
    return {
        "type": issue.category.value,
        "severity": issue.severity.name,
        "class_name": issue.class_name,
        "method_name": issue.method_name,
        "line": issue.line,
        "file_path": issue.file_path,
        "description": issue.description,
        "suggested_fix": issue.suggested_fix,
        "code_snippet": issue.code_snippet,
        "confidence": round(issue.confidence, 3),
    }


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    worst = result.max_severity
    return {
        "file_path": result.file_path,
        "thread_safe": result.thread_safe,
        "analyzed_classes": result.analyzed_classes,
        "has_errors": result.has_errors,
        "error_message": result.error_message,
        "max_severity": worst.name if worst is not None else None,
        "issues": [issue_to_dict(issue) for issue in result.issues],
        "recommendations": list(result.recommendations),
    }


def statistics_to_dict(stats: ScanStatistics) -> dict[str, Any]:
    return {
        "total_units": stats.total_units,
        "total_issues": stats.total_issues,
        "total_recommendations": stats.total_recommendations,
        "thread_safe_count": stats.thread_safe_count,
        "problematic_count": stats.problematic_count,
        "failed_units": stats.failed_units,
        "analyzed_classes": stats.analyzed_classes,
        "issues_by_severity": dict(stats.issues_by_severity),
        "issues_by_category": dict(stats.issues_by_category),
        "duration_ms": round(stats.duration_ms, 1),
    }


def report_to_dict(results: Iterable[AnalysisResult], stats: ScanStatistics) -> dict[str, Any]:
    return {
        "summary": statistics_to_dict(stats),
        "results": [result_to_dict(result) for result in results],
    }
