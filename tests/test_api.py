"""End-to-end tests for the public API."""

import threading

import pytest

from concurrency_insight import ScanReport, analyze_sources, scan
from concurrency_insight.config import AnalysisConfig
from concurrency_insight.exceptions import InvalidPathError
from concurrency_insight.insights.models import IssueCategory
from concurrency_insight.scanning.models import ClassDescriptor, FieldDescriptor, unit_from_classes

PREFIX = "src/main/java/com/acme/"


class TestScan:
    """scan(): discovery, extraction, analysis, statistics."""

    def test_results_in_path_order(self, java_project):
        report = scan(java_project)
        assert isinstance(report, ScanReport)
        assert [r.file_path for r in report.results] == [
            PREFIX + "Broken.java",
            PREFIX + "Counter.java",
            PREFIX + "Registry.java",
        ]

    def test_verdicts(self, java_project):
        broken, counter, registry = scan(java_project).results

        assert broken.has_errors and not broken.thread_safe
        assert not counter.thread_safe
        assert registry.thread_safe and registry.issues == ()

    def test_counter_issues(self, java_project):
        counter = scan(java_project).results[1]
        assert [(i.category, i.line) for i in counter.issues] == [
            (IssueCategory.SHARED_MUTABLE_STATE, 9),
            (IssueCategory.UNSAFE_PUBLICATION, 11),
            (IssueCategory.POTENTIAL_RACE_CONDITION, 14),
            (IssueCategory.EXECUTOR_NOT_SHUTDOWN, 12),
            (IssueCategory.ATOMIC_OPPORTUNITY, 10),
            (IssueCategory.ATOMIC_OPPORTUNITY, 11),
        ]
        assert "  9:     private Map<String, Integer> cache" in counter.issues[0].code_snippet

    def test_statistics(self, java_project):
        stats = scan(java_project).statistics
        assert stats.total_units == 3
        assert stats.total_issues == 6
        assert stats.thread_safe_count == 1
        assert stats.problematic_count == 2
        assert stats.failed_units == 1
        assert stats.analyzed_classes == 2
        assert stats.duration_ms >= 0

    def test_parallel_matches_sequential(self, java_project):
        sequential = scan(java_project, config=AnalysisConfig(workers=1))
        parallel = scan(java_project, config=AnalysisConfig(workers=4))
        assert sequential.results == parallel.results

    def test_single_file(self, java_project):
        report = scan(java_project / (PREFIX + "Registry.java"))
        assert report.thread_safe
        assert report.statistics.total_units == 1

    def test_cancelled_scan(self, java_project):
        event = threading.Event()
        event.set()
        report = scan(java_project, cancel_event=event)
        assert report.results == ()
        assert report.statistics.total_units == 0

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            scan(tmp_path / "missing")


class TestAnalyzeSources:
    """analyze_sources(): bring your own units."""

    def test_prebuilt_units(self):
        cls = ClassDescriptor(name="Stats", fields=(FieldDescriptor("count", "int"),))
        report = analyze_sources([unit_from_classes("Stats.java", [cls])])

        assert report.statistics.total_issues == 1
        assert report.results[0].issues[0].category is IssueCategory.ATOMIC_OPPORTUNITY
        assert report.thread_safe

    def test_empty(self):
        report = analyze_sources([])
        assert report.results == ()
        assert report.statistics.total_units == 0
