"""``concurrency-insight`` command line.

A single-command typer app: the analysis runs in the app callback, so
``concurrency-insight -C project/`` needs no subcommand name.
"""

import typer

from ._common import console

app = typer.Typer(
    name="concurrency-insight",
    help="Concurrency Insight - rule-based thread-safety checks for Java sources",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_show_locals=False,
)

# Registers the callback on ``app``
from .analyze import main as _main_callback  # noqa: F401, E402

__all__ = ["app", "console"]
