"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from concurrency_insight.logging_config import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestSetupLogging:
    """Verbosity maps onto package logger levels."""

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_unknown_verbosity_falls_back_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("normal")
        logger = setup_logging("verbose")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "scan.log"
        setup_logging("normal", log_file=str(log_file))
        get_logger("concurrency_insight.insights.engine").warning("Analysis stopped early")
        for handler in logging.getLogger(ROOT_LOGGER).handlers:
            handler.flush()
        assert "WARNING - Analysis stopped early" in log_file.read_text()


class TestGetLogger:
    """Loggers live under the package namespace."""

    def test_root(self):
        assert get_logger().name == ROOT_LOGGER

    def test_module_name_kept(self):
        assert get_logger("concurrency_insight.api").name == "concurrency_insight.api"

    def test_foreign_name_prefixed(self):
        assert get_logger("plugins.custom").name == "concurrency_insight.plugins.custom"
