"""Main analysis command."""

import json
from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape
from rich.table import Table

from ..api import ScanReport, scan
from ..exceptions import ConcurrencyInsightError
from ..insights.models import AnalysisResult, Severity
from ..insights.serializers import report_to_dict
from ..logging_config import setup_logging
from . import app
from ._common import SEVERITY_STYLES, console, resolve_config


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Project root or single .java file to analyze (default: current directory)",
        exists=True,
        file_okay=True,
        dir_okay=True,
        readable=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every file with issues, suggested fixes and code snippets",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    fail_on: Optional[str] = typer.Option(
        None,
        "--fail-on",
        help="Exit 1 if issues meet threshold: any | high",
        click_type=click.Choice(["any", "high"], case_sensitive=False),
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    deadline: Optional[float] = typer.Option(
        None,
        "--deadline",
        help="Stop starting new files after this many seconds",
        min=0.001,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Analyze Java sources for thread-safety problems.

    Finds shared mutable state, unsafe publication, race-prone mutators,
    deadlock-prone synchronization, unsafe collections, executors that are
    never shut down, atomic candidates and lock usage.

    [bold cyan]Examples:[/bold cyan]

      concurrency-insight

      concurrency-insight --json

      concurrency-insight -C /path/to/project --fail-on high
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Concurrency Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    target = Path(path) if path else Path.cwd()
    logger = setup_logging("quiet" if quiet else "verbose" if verbose else "normal")

    try:
        settings = resolve_config(
            config=config,
            workers=workers,
            deadline=deadline,
            verbose=verbose,
            quiet=quiet,
        )
        # A config file may set verbosity too
        logger = setup_logging(settings.verbosity)

        report = scan(target, config=settings)

        if json_output:
            _output_json(report)
        else:
            _output_rich(report, target, verbose=verbose)

        if fail_on is not None and _check_fail_condition(fail_on.lower(), report):
            raise typer.Exit(1)

    except typer.Exit:
        raise

    except ConcurrencyInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        if json_output:
            print(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Fail-on condition
# ---------------------------------------------------------------------------


def _check_fail_condition(fail_on: str, report: ScanReport) -> bool:
    issues = [issue for result in report.results for issue in result.issues]
    if fail_on == "any" and issues:
        console.print(f"[red]--fail-on any:[/red] {len(issues)} issue(s) detected")
        return True
    if fail_on == "high":
        high = [issue for issue in issues if issue.severity >= Severity.HIGH]
        if high:
            console.print(f"[red]--fail-on high:[/red] {len(high)} high-severity issue(s) detected")
            return True
    return False


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _output_json(report: ScanReport):
    """Machine-readable JSON output."""
    print(json.dumps(report_to_dict(report.results, report.statistics), indent=2))


def _output_rich(report: ScanReport, target: Path, verbose: bool = False):
    """Human-readable Rich terminal output, one table per flagged file."""
    stats = report.statistics
    console.print()
    console.print(
        f"[bold cyan]CONCURRENCY INSIGHT[/bold cyan] - [bold]{stats.total_units}[/bold] files, "
        f"[bold]{stats.analyzed_classes}[/bold] classes analyzed in {escape(str(target))}"
    )
    console.print()

    shown = [r for r in report.results if not r.thread_safe or (verbose and r.issues)]
    if not shown and not stats.total_issues:
        console.print("[bold green]No concurrency issues found.[/bold green]")
    for result in shown:
        _print_result(result, verbose=verbose)

    _print_summary(report)


def _print_result(result: AnalysisResult, verbose: bool = False):
    if result.has_errors:
        console.print(
            f"[bold red]FAILED[/bold red] {escape(result.file_path)}: "
            f"{escape(result.error_message or 'unknown error')}"
        )
        console.print()
        return

    verdict = "[green]thread-safe[/green]" if result.thread_safe else "[red]not thread-safe[/red]"
    console.print(f"[bold]{escape(result.file_path)}[/bold] - {verdict}")

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Severity")
    table.add_column("Category")
    table.add_column("Location")
    table.add_column("Description", overflow="fold")
    for issue in result.issues:
        style = SEVERITY_STYLES.get(issue.severity, "")
        table.add_row(
            f"[{style}]{issue.severity.name}[/{style}]" if style else issue.severity.name,
            issue.category.value,
            escape(issue.location),
            escape(issue.description),
        )
    console.print(table)

    if verbose:
        for issue in result.issues:
            if issue.suggested_fix:
                console.print(
                    f"  [cyan]{escape(issue.location)}[/cyan] fix: {escape(issue.suggested_fix)}"
                )
            if issue.code_snippet:
                console.print(f"[dim]{escape(issue.code_snippet.rstrip())}[/dim]", highlight=False)
    console.print()


def _print_summary(report: ScanReport):
    stats = report.statistics
    table = Table(title="Summary", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Files", str(stats.total_units))
    table.add_row("Thread-safe", f"[green]{stats.thread_safe_count}[/green]")
    table.add_row("Problematic", f"[red]{stats.problematic_count}[/red]")
    if stats.failed_units:
        table.add_row("Failed", str(stats.failed_units))
    table.add_row("Issues", str(stats.total_issues))
    for level in reversed(Severity):
        count = stats.issues_by_severity.get(level.name, 0)
        if count:
            style = SEVERITY_STYLES[level]
            table.add_row(f"  {level.name}", f"[{style}]{count}[/{style}]")
    table.add_row("Duration", f"{stats.duration_ms:.0f} ms")
    console.print(table)
    console.print()
