"""Tests for ExecutorLifecycleAnalyzer."""

from concurrency_insight.insights.analyzers import ExecutorLifecycleAnalyzer
from concurrency_insight.insights.models import IssueCategory, Severity
from concurrency_insight.scanning.models import ClassDescriptor, FieldDescriptor, MethodDescriptor

EXECUTOR_IMPORTS = ("java.util.concurrent.ExecutorService", "java.util.concurrent.Executors")


def _worker(*methods, declared_type="ExecutorService"):
    return ClassDescriptor(
        name="Worker",
        fields=(FieldDescriptor("executor", declared_type, is_final=True, line=8),),
        methods=methods,
        line=6,
    )


class TestExecutorLifecycle:
    """Executors owned by classes without shutdown/close."""

    def test_executor_without_shutdown_is_flagged(self, make_unit):
        """One MEDIUM issue for the executor field."""
        cls = _worker(MethodDescriptor("submit"))
        issues = ExecutorLifecycleAnalyzer().analyze(make_unit(cls, imports=EXECUTOR_IMPORTS), cls)

        assert len(issues) == 1
        assert issues[0].category is IssueCategory.EXECUTOR_NOT_SHUTDOWN
        assert issues[0].severity is Severity.MEDIUM
        assert issues[0].line == 8
        assert "shutdown()" in issues[0].suggested_fix

    def test_shutdown_method_suppresses_issue(self, make_unit):
        """Any method named like shutdown counts."""
        cls = _worker(MethodDescriptor("shutdown"))
        unit = make_unit(cls, imports=EXECUTOR_IMPORTS)
        assert ExecutorLifecycleAnalyzer().analyze(unit, cls) == []

    def test_close_method_suppresses_issue(self, make_unit):
        """close (any case) counts as a lifecycle method."""
        cls = _worker(MethodDescriptor("onClose"))
        unit = make_unit(cls, imports=EXECUTOR_IMPORTS)
        assert ExecutorLifecycleAnalyzer().analyze(unit, cls) == []

    def test_requires_executor_import(self, make_unit):
        """Without an executor import the analyzer stays silent."""
        cls = _worker()
        unit = make_unit(cls, imports=("java.util.List",))
        assert ExecutorLifecycleAnalyzer().analyze(unit, cls) == []

    def test_thread_pool_executor_type(self, make_unit):
        """ThreadPoolExecutor fields are covered too."""
        cls = _worker(declared_type="ThreadPoolExecutor")
        unit = make_unit(cls, imports=("java.util.concurrent.ThreadPoolExecutor",))
        assert len(ExecutorLifecycleAnalyzer().analyze(unit, cls)) == 1
