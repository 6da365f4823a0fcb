"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..insights.models import Severity

console = Console()

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    deadline: Optional[float] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build the analysis config from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if deadline is not None:
        overrides["deadline_seconds"] = deadline
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
