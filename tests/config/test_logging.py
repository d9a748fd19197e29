"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
import warnings

import pytest
import structlog

from lpfcalc.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("lpfcalc").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("lpfcalc").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("lpfcalc.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("lpfcalc.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "lpfcalc.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("lpfcalc.services.design").debug("Designing order-2 low-pass")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Designing order-2 low-pass"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "lpfcalc.services.design"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("lpfcalc.services.design").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("numpy").debug("array noise")
        assert capfd.readouterr().err == ""

    def test_python_warnings_are_captured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.warn("overflow encountered", RuntimeWarning, stacklevel=1)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "py.warnings"
        assert "overflow encountered" in parsed["event"]

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
