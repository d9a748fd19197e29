"""DesignService — coefficient design and transfer-function analysis.

Wraps the pure designer in the ServiceResult contract:

- ``design()``: validate inputs, derive coefficients.
- ``analyze()``: design, then report poles, stability, DC gain, and the
  magnitude response at the cutoff and any requested frequencies.

Validation failures become ``ServiceError`` values carrying the
structured detail from the domain plus a human-readable message.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

from lpfcalc.domain import analysis
from lpfcalc.domain.designer import design as design_coefficients
from lpfcalc.domain.types import (
    CutoffAtOrAboveNyquist,
    FilterCoefficients,
    FilterOrder,
    FilterRequest,
    NonPositiveCutoff,
    NonPositiveInterval,
    ValidationFailure,
)
from lpfcalc.services._helpers import format_significant
from lpfcalc.services.contracts import AnalyzeResultData, DesignResultData, dump_validated
from lpfcalc.services.result import ServiceError, ServiceResult
from lpfcalc.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

UNSUPPORTED_ORDER = "UNSUPPORTED_ORDER"


def failure_message(failure: ValidationFailure) -> str:
    """Human-readable message for a validation failure."""
    if isinstance(failure, NonPositiveInterval):
        return "Sample period Ts must be > 0."
    if isinstance(failure, NonPositiveCutoff):
        return "Cutoff frequency must be > 0."
    if isinstance(failure, CutoffAtOrAboveNyquist):
        return (
            "Cutoff must be below Nyquist (Fs/2). "
            f"Your Fs = {format_significant(failure.sample_rate_hz)} Hz "
            f"so Nyquist = {format_significant(failure.nyquist_hz)} Hz."
        )
    return f"Invalid filter request: {failure.code}"


class DesignService:
    """Low-pass IIR coefficient operations.

    Stateless: one instance may serve any number of concurrent callers.
    """

    @traced
    def design(self, order: int, cutoff_hz: float, sample_period: float) -> ServiceResult:
        """Derive order-1 or order-2 low-pass coefficients."""
        op = "design"
        outcome = self._design(op, order, cutoff_hz, sample_period)
        if isinstance(outcome, ServiceResult):
            return outcome

        request, coeffs = outcome
        data = dump_validated(DesignResultData, _design_payload(request, coeffs))
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def analyze(
        self,
        order: int,
        cutoff_hz: float,
        sample_period: float,
        *,
        frequencies: Iterable[float] = (),
    ) -> ServiceResult:
        """Design a filter and evaluate its transfer function."""
        op = "analyze"
        warnings: list[str] = []
        outcome = self._design(op, order, cutoff_hz, sample_period)
        if isinstance(outcome, ServiceResult):
            return outcome

        request, coeffs = outcome
        in_band: list[float] = []
        for freq in frequencies:
            if 0 <= freq < coeffs.nyquist_hz:
                in_band.append(float(freq))
            else:
                warnings.append(
                    f"Skipped {format_significant(freq)} Hz: outside "
                    f"[0, {format_significant(coeffs.nyquist_hz)}) Hz"
                )

        with trace_span("analysis") as span:
            poles = analysis.poles(coeffs)
            dc_gain = analysis.dc_gain(coeffs)
            cutoff_gain = analysis.gain_db(coeffs, [request.cutoff_hz])[0]
            gains = analysis.gain_db(coeffs, in_band)
            if span is not None:
                span.annotate("points", len(in_band))

        if not math.isfinite(dc_gain):
            warnings.append(
                "DC gain is undefined: 1 + D1 + D2 rounds to 0 at this cutoff to sample-rate ratio"
            )

        payload = _design_payload(request, coeffs)
        payload.update(
            {
                "dc_gain": dc_gain,
                "stable": analysis.is_stable(coeffs),
                "cutoff_gain_db": float(cutoff_gain),
                "poles": [{"real": p.real, "imag": p.imag, "magnitude": abs(p)} for p in poles],
                "response": [
                    {"frequency_hz": f, "gain_db": float(g)}
                    for f, g in zip(in_band, gains, strict=True)
                ],
            }
        )
        data = dump_validated(AnalyzeResultData, payload)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ── Internals ────────────────────────────────────────────────────

    def _design(
        self,
        op: str,
        order: int,
        cutoff_hz: float,
        sample_period: float,
    ) -> tuple[FilterRequest, FilterCoefficients] | ServiceResult:
        """Run validation and derivation, or return the failure result."""
        try:
            filter_order = FilterOrder(order)
        except ValueError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=UNSUPPORTED_ORDER,
                    message=f"Unsupported filter order: {order}. Expected 1 or 2.",
                    detail={"order": order},
                ),
            )

        request = FilterRequest(
            order=filter_order,
            cutoff_hz=cutoff_hz,
            sample_period=sample_period,
        )
        logger.debug(
            "Designing order-%d low-pass, fc=%r Hz, Ts=%r s",
            filter_order,
            cutoff_hz,
            sample_period,
        )

        with trace_span("designer.design") as span:
            result = design_coefficients(request)
            if span is not None:
                span.annotate("order", int(filter_order))

        if isinstance(result, ValidationFailure):
            logger.debug("Rejected filter request: %s", result.code)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=str(result.code),
                    message=failure_message(result),
                    detail=result.detail(),
                ),
            )
        return request, result


def _design_payload(request: FilterRequest, coeffs: FilterCoefficients) -> dict[str, Any]:
    payload = coeffs.as_dict()
    payload["cutoff_hz"] = request.cutoff_hz
    payload["sample_period"] = request.sample_period
    return payload
