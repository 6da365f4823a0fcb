"""Public API for Concurrency Insight.

Example:
    >>> from concurrency_insight import scan
    >>>
    >>> report = scan("/path/to/project")
    >>> report.statistics.problematic_count
    2
    >>> [r.file_path for r in report.results if not r.thread_safe]
    ['src/main/java/com/acme/Cache.java', 'src/main/java/com/acme/Pool.java']
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import DEFAULT_CONFIG, AnalysisConfig
from .insights.engine import AnalysisEngine, ProgressCallback
from .insights.models import AnalysisResult, ScanStatistics
from .insights.statistics import aggregate_statistics
from .logging_config import get_logger
from .scanning.discovery import discover_java_files
from .scanning.extractor import SourceExtractor, extract_file
from .scanning.models import SourceUnit

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScanReport:
    """Per-unit results (input order) plus the aggregated statistics."""

    results: tuple[AnalysisResult, ...]
    statistics: ScanStatistics

    @property
    def thread_safe(self) -> bool:
        return all(result.thread_safe for result in self.results)


def scan(
    path: Union[str, Path] = ".",
    config: Optional[AnalysisConfig] = None,
    extractor: Optional[SourceExtractor] = None,
    cancel_event: Optional[threading.Event] = None,
    on_progress: ProgressCallback = None,
) -> ScanReport:
    """Discover, extract and analyze every Java file under ``path``.

    Args:
        path: Project root, or a single ``.java`` file
        config: Analysis configuration (defaults when omitted)
        extractor: Source extractor; tree-sitter Java extraction by default
        cancel_event: Once set, no further file is extracted or analyzed
        on_progress: Called with a status line after each analyzed unit

    Returns:
        ScanReport with results in discovery (sorted path) order

    Raises:
        InvalidPathError: If ``path`` does not exist
        EngineError: If the analysis itself could not be completed
    """
    config = config or DEFAULT_CONFIG
    started = time.perf_counter()
    root = Path(path)

    if extractor is None:
        from .scanning.java import JavaSourceExtractor

        extractor = JavaSourceExtractor()

    files = discover_java_files(root, config)
    units: list[SourceUnit] = []
    for filepath in files:
        if cancel_event is not None and cancel_event.is_set():
            logger.warning(f"Scan cancelled after extracting {len(units)} of {len(files)} file(s)")
            break
        display = filepath.relative_to(root).as_posix() if root.is_dir() else str(filepath)
        units.append(extract_file(extractor, filepath, display))

    return _run(units, config, cancel_event, on_progress, started)


def analyze_sources(
    units: Iterable[SourceUnit],
    config: Optional[AnalysisConfig] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ScanReport:
    """Analyze already-extracted units (for callers with their own parser)."""
    return _run(list(units), config or DEFAULT_CONFIG, cancel_event, None, time.perf_counter())


def _run(
    units: list[SourceUnit],
    config: AnalysisConfig,
    cancel_event: Optional[threading.Event],
    on_progress: ProgressCallback,
    started: float,
) -> ScanReport:
    engine = AnalysisEngine(config=config)
    results = engine.analyze_units(units, cancel_event=cancel_event, on_progress=on_progress)
    duration_ms = (time.perf_counter() - started) * 1000
    statistics = aggregate_statistics(results, duration_ms=duration_ms)
    logger.info(str(statistics))
    return ScanReport(results=tuple(results), statistics=statistics)
