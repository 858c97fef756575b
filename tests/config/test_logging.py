"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from commitlinter.config.logging import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the package logger after each test."""
    pkg = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = pkg.handlers[:], pkg.level, pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        configure_logging(verbose=True, log_json=True)
        assert root.handlers == handlers
        assert root.level == level
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("commitlinter.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "commitlinter.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("commitlinter.config.loader").debug("Loaded rule file")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Loaded rule file"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "commitlinter.config.loader"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        logging.getLogger("commitlinter.services.lint").debug("noise")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_other_loggers_not_captured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("somebody.else").debug("not ours")

        assert "not ours" not in capfd.readouterr().err

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
