"""Shared pytest fixtures and test helpers for lpfcalc tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lpfcalc.domain.designer import design
from lpfcalc.domain.types import FilterCoefficients, FilterOrder, FilterRequest
from lpfcalc.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no lpfcalc.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes, or request it directly to get the directory.
    """
    monkeypatch.delenv("LPFCALC_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lpf = logging.getLogger("lpfcalc")
    lpf_level = lpf.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lpf.setLevel(lpf_level)
    logging.captureWarnings(False)
    disable_telemetry()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def designed(order: int, cutoff_hz: float, sample_period: float) -> FilterCoefficients:
    """Design a filter, asserting the request is valid."""
    result = design(FilterRequest(FilterOrder(order), cutoff_hz, sample_period))
    assert isinstance(result, FilterCoefficients), result
    return result
