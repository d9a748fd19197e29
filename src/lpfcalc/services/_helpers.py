"""Shared service-layer helper functions."""

from __future__ import annotations

import math

# 17 significant digits round-trip any IEEE double.
ROUND_TRIP_DIGITS = 17


def format_significant(value: float, digits: int = ROUND_TRIP_DIGITS) -> str:
    """Format *value* with *digits* significant digits, trailing zeros trimmed.

    Follows JavaScript's ``Number.prototype.toPrecision``: fixed notation
    when the decimal exponent ``e`` satisfies ``-6 <= e < digits``,
    otherwise ``d.ddde+x``. Non-finite values become ``"NaN"``.

    Examples:
        >>> format_significant(0.1)
        '0.10000000000000001'
        >>> format_significant(100.0)
        '100'
        >>> format_significant(1e21)
        '1e+21'
        >>> format_significant(0.0)
        '0'
    """
    if not math.isfinite(value):
        return "NaN"
    if value == 0:
        return "0"

    # The exponent of the *rounded* mantissa decides the notation.
    mantissa, _, exp_text = f"{value:.{digits - 1}e}".partition("e")
    exponent = int(exp_text)

    if -6 <= exponent < digits:
        text = f"{value:.{digits - 1 - exponent}f}"
        return _trim_fraction(text)

    sign = "+" if exponent >= 0 else "-"
    return f"{_trim_fraction(mantissa)}e{sign}{abs(exponent)}"


def _trim_fraction(text: str) -> str:
    """Drop trailing zeros after the decimal point (and the point itself)."""
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")
