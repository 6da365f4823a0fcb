"""AnalysisEngine: runs every analyzer over every class of every unit."""

from __future__ import annotations

import concurrent.futures
import threading
import time
from typing import Callable, Optional, Sequence

from ..config import AnalysisConfig, DEFAULT_CONFIG
from ..exceptions import EngineError, InvariantViolationError
from ..logging_config import get_logger
from ..scanning.models import ClassDescriptor, SourceUnit
from .analyzers import get_default_analyzers
from .models import AnalysisResult, ConcurrencyIssue, IssueCategory, Severity
from .protocols import ConcurrencyAnalyzer

ProgressCallback = Optional[Callable[[str], None]]

logger = get_logger(__name__)


class AnalysisEngine:
    """Orchestrate analysis: units -> classes -> analyzers -> merged results.

    The analyzer list is fixed at construction. Issues for a class are
    concatenated in analyzer order, classes in declaration order, and
    results in input unit order, whether or not units run in parallel.
    """

    def __init__(
        self,
        analyzers: Optional[Sequence[ConcurrencyAnalyzer]] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        if analyzers is None:
            analyzers = get_default_analyzers(self.config)
        self._analyzers: tuple[ConcurrencyAnalyzer, ...] = tuple(analyzers)

    @property
    def analyzers(self) -> tuple[ConcurrencyAnalyzer, ...]:
        return self._analyzers

    def analyze_units(
        self,
        units: Sequence[SourceUnit],
        cancel_event: Optional[threading.Event] = None,
        deadline_seconds: Optional[float] = None,
        on_progress: ProgressCallback = None,
    ) -> list[AnalysisResult]:
        """Analyze units and return one result per analyzed unit, in input order.

        Parameters
        ----------
        units : sequence of SourceUnit
            Extracted units. Units carrying a parse error produce failed
            results without blocking the others.
        cancel_event : threading.Event, optional
            Once set, no further unit analysis starts. Analyses already
            running finish and their results are kept.
        deadline_seconds : float, optional
            Same as ``cancel_event`` but triggered by elapsed time. Falls back
            to ``config.deadline_seconds``.
        on_progress : callable, optional
            Called with a short status message after each unit.

        Raises
        ------
        EngineError
            When the scan itself cannot continue (e.g. a nameless class).
        """
        if deadline_seconds is None:
            deadline_seconds = self.config.deadline_seconds
        deadline_at = time.monotonic() + deadline_seconds if deadline_seconds else None

        def _should_stop() -> bool:
            if cancel_event is not None and cancel_event.is_set():
                return True
            return deadline_at is not None and time.monotonic() >= deadline_at

        logger.info(f"Starting concurrency analysis for {len(units)} unit(s)")

        workers = min(self.config.effective_workers, max(1, len(units)))
        if workers <= 1:
            slots = self._run_sequential(units, _should_stop, on_progress)
        else:
            slots = self._run_parallel(units, workers, _should_stop, on_progress)

        results = [result for result in slots if result is not None]
        skipped = len(units) - len(results)
        if skipped:
            logger.warning(f"Analysis stopped early: {skipped} unit(s) not analyzed")

        logger.info(f"Concurrency analysis completed. Total results: {len(results)}")
        return results

    def analyze_unit(self, unit: SourceUnit) -> AnalysisResult:
        """Analyze every class of one unit and merge the issues."""
        if unit.has_error:
            logger.debug(f"Skipping unit with extraction error: {unit.path}")
            return AnalysisResult.failed(unit.path, unit.parse_error or "extraction failed")

        issues: list[ConcurrencyIssue] = []
        for cls in unit.classes:
            issues.extend(self.analyze_class(unit, cls))

        result = AnalysisResult.from_issues(unit.path, issues, analyzed_classes=len(unit.classes))
        logger.debug(f"Analysis complete for {unit.path}: {len(issues)} issues found")
        return result

    def analyze_class(self, unit: SourceUnit, cls: ClassDescriptor) -> list[ConcurrencyIssue]:
        """Run all analyzers against one class, isolating analyzer failures."""
        if not cls.name:
            raise InvariantViolationError("class descriptor has no name", filepath=unit.path)

        issues: list[ConcurrencyIssue] = []
        for analyzer in self._analyzers:
            try:
                found = _checked_issues(analyzer, analyzer.analyze(unit, cls))
            except Exception as e:
                logger.warning(f"Analyzer {analyzer.name} failed on {unit.path}::{cls.name}: {e}")
                issues.append(_analyzer_error_issue(analyzer, unit, cls, e))
                continue
            issues.extend(found)
        return issues

    # ── Scheduling ─────────────────────────────────────────────

    def _run_sequential(
        self,
        units: Sequence[SourceUnit],
        should_stop: Callable[[], bool],
        on_progress: ProgressCallback,
    ) -> list[Optional[AnalysisResult]]:
        slots: list[Optional[AnalysisResult]] = [None] * len(units)
        for index, unit in enumerate(units):
            if should_stop():
                break
            slots[index] = self._analyze_unit_guarded(unit)
            _report(on_progress, index + 1, len(units), unit)
        return slots

    def _run_parallel(
        self,
        units: Sequence[SourceUnit],
        workers: int,
        should_stop: Callable[[], bool],
        on_progress: ProgressCallback,
    ) -> list[Optional[AnalysisResult]]:
        # Index-addressed slots: completion order never leaks into output order
        slots: list[Optional[AnalysisResult]] = [None] * len(units)

        def _task(unit: SourceUnit) -> Optional[AnalysisResult]:
            if should_stop():
                return None
            return self._analyze_unit_guarded(unit)

        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(_task, unit): index for index, unit in enumerate(units)}
            done = 0
            try:
                for future in concurrent.futures.as_completed(futures):
                    index = futures[future]
                    slots[index] = future.result()
                    if slots[index] is None:
                        continue
                    done += 1
                    _report(on_progress, done, len(units), units[index])
            except EngineError:
                for future in futures:
                    future.cancel()
                raise

        return slots

    def _analyze_unit_guarded(self, unit: SourceUnit) -> AnalysisResult:
        try:
            return self.analyze_unit(unit)
        except EngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to analyze unit: {unit.path}: {e}")
            return AnalysisResult.failed(unit.path, str(e) or e.__class__.__name__)


def _checked_issues(analyzer: ConcurrencyAnalyzer, found: object) -> list[ConcurrencyIssue]:
    """Materialize an analyzer's return value; None counts as no issues.

    Raises:
        TypeError: If the value is not an iterable of ConcurrencyIssue
    """
    if found is None:
        return []
    issues = list(found)  # type: ignore[call-overload]
    for issue in issues:
        if not isinstance(issue, ConcurrencyIssue):
            raise TypeError(
                f"{analyzer.name} returned {type(issue).__name__}, expected ConcurrencyIssue"
            )
    return issues


def _analyzer_error_issue(
    analyzer: ConcurrencyAnalyzer,
    unit: SourceUnit,
    cls: ClassDescriptor,
    error: Exception,
) -> ConcurrencyIssue:
    return ConcurrencyIssue(
        category=IssueCategory.ANALYZER_ERROR,
        class_name=cls.name,
        severity=Severity.LOW,
        line=cls.line,
        file_path=unit.path,
        description=(
            f"Analyzer '{getattr(analyzer, 'name', type(analyzer).__name__)}' failed on this "
            f"class: {error.__class__.__name__}: {error}"
        ),
        suggested_fix="Results for this class are incomplete; review it manually",
        confidence=0.0,
    )


def _report(on_progress: ProgressCallback, done: int, total: int, unit: SourceUnit) -> None:
    if on_progress is not None:
        on_progress(f"[{done}/{total}] {unit.path}")
