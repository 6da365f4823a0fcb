"""
Logging for Concurrency Insight.

Every module logs through ``get_logger(__name__)`` under the
``concurrency_insight`` namespace. ``setup_logging`` attaches a rich
handler on stderr, so diagnostics never mix with report output on stdout,
and maps the configured verbosity onto a level.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "concurrency_insight"

# quiet: errors only; normal: warnings (skipped files, stopped scans);
# verbose: per-class analyzer counts and parse details
VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        verbosity: One of quiet, normal, verbose (``AnalysisConfig.verbosity``)
        log_file: Optional file that additionally receives every record at
            the chosen level

    Returns:
        The ``concurrency_insight`` logger
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    debug = level <= logging.DEBUG

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
        show_time=debug,
        show_path=debug,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handlers: list[logging.Handler] = [console_handler]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (e.g., 'concurrency_insight.insights.engine').
              Names outside the package are prefixed with it. If None,
              returns the package logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
