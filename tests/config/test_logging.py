"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from medform.config.logging import configure_logging, rule_context


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    medform = logging.getLogger("medform")
    medform_level = medform.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    medform.setLevel(medform_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("medform").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("medform").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("medform.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "medform.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("medform.services").debug("Accepted")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Accepted"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("medform.services").debug("hidden")
        assert capfd.readouterr().err == ""


class TestRuleContext:
    def test_binds_spec_name(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with rule_context("appointment:create"):
            logging.getLogger("medform.services").debug("inside")
        logging.getLogger("medform.services").debug("outside")
        lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        assert lines[0]["rule_spec"] == "appointment:create"
        assert "rule_spec" not in lines[1]
