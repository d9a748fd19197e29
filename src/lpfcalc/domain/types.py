"""Filter request/result types and the validation failure variants.

All types are immutable. A design call produces either a
:class:`FilterCoefficients` or exactly one :class:`ValidationFailure`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum, StrEnum
from typing import Any, ClassVar


class FilterOrder(IntEnum):
    """Supported low-pass filter orders."""

    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class FilterRequest:
    """Inputs to the filter designer."""

    order: FilterOrder
    cutoff_hz: float
    sample_period: float


@dataclass(frozen=True)
class FilterCoefficients:
    """Normalized z-domain transfer function of a low-pass filter.

    The output recurrence is::

        y[k] = n0*x[k] + n1*x[k-1] + n2*x[k-2] - d1*y[k-1] - d2*y[k-2]

    ``n2`` and ``d2`` are exactly 0.0 for first-order filters.
    """

    order: FilterOrder
    n0: float
    n1: float
    n2: float
    d1: float
    d2: float
    sample_rate_hz: float
    nyquist_hz: float

    @property
    def numerator(self) -> tuple[float, float, float]:
        return (self.n0, self.n1, self.n2)

    @property
    def denominator(self) -> tuple[float, float, float]:
        """Denominator in ``1 + d1 z^-1 + d2 z^-2`` form."""
        return (1.0, self.d1, self.d2)

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["order"] = int(self.order)
        return data


# --- Validation failures ---


class FailureCode(StrEnum):
    """Stable identifiers for each validation failure."""

    NON_POSITIVE_INTERVAL = "NON_POSITIVE_INTERVAL"
    NON_POSITIVE_CUTOFF = "NON_POSITIVE_CUTOFF"
    CUTOFF_AT_OR_ABOVE_NYQUIST = "CUTOFF_AT_OR_ABOVE_NYQUIST"


@dataclass(frozen=True)
class ValidationFailure:
    """Base for the three request validation failures."""

    code: ClassVar[FailureCode]

    def detail(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NonPositiveInterval(ValidationFailure):
    """The sample period was zero, negative, or NaN."""

    code: ClassVar[FailureCode] = FailureCode.NON_POSITIVE_INTERVAL

    sample_period: float


@dataclass(frozen=True)
class NonPositiveCutoff(ValidationFailure):
    """The cutoff frequency was zero, negative, or NaN."""

    code: ClassVar[FailureCode] = FailureCode.NON_POSITIVE_CUTOFF

    cutoff_hz: float


@dataclass(frozen=True)
class CutoffAtOrAboveNyquist(ValidationFailure):
    """The cutoff frequency was not strictly below the Nyquist frequency."""

    code: ClassVar[FailureCode] = FailureCode.CUTOFF_AT_OR_ABOVE_NYQUIST

    sample_rate_hz: float
    nyquist_hz: float
