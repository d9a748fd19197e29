"""Low-pass filter coefficient derivation.

Both orders use the bilinear transform with frequency prewarping:
``K = tan(pi * fc / Fs)`` maps the requested analog cutoff exactly onto
the discrete -3 dB point. Order 2 is a Butterworth section (Q = 1/sqrt(2)).

INVARIANT: Pure functions only. No logging, no I/O, no shared state.
Identical requests always produce bit-identical coefficients.
"""

from __future__ import annotations

import math

from lpfcalc.domain.types import (
    CutoffAtOrAboveNyquist,
    FilterCoefficients,
    FilterOrder,
    FilterRequest,
    NonPositiveCutoff,
    NonPositiveInterval,
    ValidationFailure,
)

SQRT2 = math.sqrt(2.0)


def validate_request(request: FilterRequest) -> ValidationFailure | None:
    """Return the first validation failure for *request*, or None.

    Checks run in a fixed order: sample period, cutoff, Nyquist bound.
    The ``not (x > 0)`` form rejects NaN as well as non-positive values.
    """
    if not (request.sample_period > 0):
        return NonPositiveInterval(sample_period=request.sample_period)
    if not (request.cutoff_hz > 0):
        return NonPositiveCutoff(cutoff_hz=request.cutoff_hz)

    sample_rate_hz = 1 / request.sample_period
    nyquist_hz = sample_rate_hz / 2
    # Strict: anything below Nyquist is accepted, however close.
    if request.cutoff_hz >= nyquist_hz:
        return CutoffAtOrAboveNyquist(sample_rate_hz=sample_rate_hz, nyquist_hz=nyquist_hz)
    return None


def prewarp(cutoff_hz: float, sample_rate_hz: float) -> float:
    """Prewarped cutoff ``K = tan(pi * fc / Fs)`` for the bilinear transform."""
    return math.tan(math.pi * (cutoff_hz / sample_rate_hz))


def first_order(cutoff_hz: float, sample_rate_hz: float) -> FilterCoefficients:
    """Single real pole low-pass section."""
    k = prewarp(cutoff_hz, sample_rate_hz)
    norm = 1 / (1 + k)

    n0 = k * norm
    return FilterCoefficients(
        order=FilterOrder.ONE,
        n0=n0,
        n1=n0,
        n2=0.0,
        d1=(k - 1) * norm,
        d2=0.0,
        sample_rate_hz=sample_rate_hz,
        nyquist_hz=sample_rate_hz / 2,
    )


def second_order(cutoff_hz: float, sample_rate_hz: float) -> FilterCoefficients:
    """Second-order Butterworth low-pass section."""
    k = prewarp(cutoff_hz, sample_rate_hz)
    k2 = k * k
    den = 1 + SQRT2 * k + k2

    n0 = k2 / den
    return FilterCoefficients(
        order=FilterOrder.TWO,
        n0=n0,
        n1=2 * n0,
        n2=n0,
        d1=(2 * (k2 - 1)) / den,
        d2=(1 - SQRT2 * k + k2) / den,
        sample_rate_hz=sample_rate_hz,
        nyquist_hz=sample_rate_hz / 2,
    )


_DERIVATIONS = {
    FilterOrder.ONE: first_order,
    FilterOrder.TWO: second_order,
}


def design(request: FilterRequest) -> FilterCoefficients | ValidationFailure:
    """Validate *request* and derive its coefficients.

    Returns a :class:`ValidationFailure` instead of raising; callers
    branch with ``isinstance``.
    """
    failure = validate_request(request)
    if failure is not None:
        return failure

    sample_rate_hz = 1 / request.sample_period
    derive = _DERIVATIONS[FilterOrder(request.order)]
    return derive(request.cutoff_hz, sample_rate_hz)
