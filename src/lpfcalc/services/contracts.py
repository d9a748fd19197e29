"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class DesignResultData(BaseModel):
    """Payload contract for ``DesignService.design``."""

    order: Literal[1, 2]
    cutoff_hz: float
    sample_period: float
    n0: float
    n1: float
    n2: float
    d1: float
    d2: float
    sample_rate_hz: float
    nyquist_hz: float


class PoleItem(BaseModel):
    """One pole of the discrete transfer function."""

    real: float
    imag: float
    magnitude: float


class ResponsePoint(BaseModel):
    """Magnitude response at one frequency."""

    frequency_hz: float
    gain_db: float


class AnalyzeResultData(DesignResultData):
    """Payload contract for ``DesignService.analyze``."""

    dc_gain: float
    stable: bool
    cutoff_gain_db: float
    poles: list[PoleItem]
    response: list[ResponsePoint]
