"""Transfer-function analysis of designed coefficients.

Evaluates ``H(z) = (n0 + n1 z^-1 + n2 z^-2) / (1 + d1 z^-1 + d2 z^-2)``
on the unit circle and locates its poles. Read-only: nothing here
applies the filter to a signal.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt
from scipy import signal

from lpfcalc.domain.types import FilterCoefficients, FilterOrder

# |H| at the cutoff of a prewarped low-pass section: 1/sqrt(2).
CUTOFF_GAIN_DB = 20 * np.log10(1 / np.sqrt(2.0))


def poles(coeffs: FilterCoefficients) -> list[complex]:
    """Roots of the characteristic polynomial ``z^N + d1 z^(N-1) + ...``."""
    if coeffs.order == FilterOrder.ONE:
        characteristic = [1.0, coeffs.d1]
    else:
        characteristic = [1.0, coeffs.d1, coeffs.d2]
    return [complex(p) for p in np.roots(characteristic)]


def is_stable(coeffs: FilterCoefficients) -> bool:
    """True when every pole lies strictly inside the unit circle."""
    return all(abs(p) < 1.0 for p in poles(coeffs))


def dc_gain(coeffs: FilterCoefficients) -> float:
    """Steady-state gain, ``H(z=1)``. Exactly 1 for a normalized low-pass.

    At cutoffs so far below Fs that ``1 + d1 + d2`` rounds to 0 the
    result is inf or nan rather than an exception.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(coeffs.numerator) / np.sum(coeffs.denominator))


def frequency_response(
    coeffs: FilterCoefficients,
    freqs_hz: Iterable[float],
) -> npt.NDArray[np.complex128]:
    """Complex response ``H(e^{jw})`` at each frequency in Hz."""
    freqs = np.asarray(list(freqs_hz), dtype=np.float64)
    if freqs.size == 0:
        return np.empty(0, dtype=np.complex128)
    with np.errstate(divide="ignore", invalid="ignore"):
        _, h = signal.freqz(
            coeffs.numerator,
            coeffs.denominator,
            worN=freqs,
            fs=coeffs.sample_rate_hz,
        )
    return np.asarray(h, dtype=np.complex128)


def gain_db(
    coeffs: FilterCoefficients,
    freqs_hz: Iterable[float],
) -> npt.NDArray[np.float64]:
    """Magnitude response in dB. A zero of ``H`` yields ``-inf``."""
    magnitude = np.abs(frequency_response(coeffs, freqs_hz))
    with np.errstate(divide="ignore", invalid="ignore"):
        return 20 * np.log10(magnitude)
