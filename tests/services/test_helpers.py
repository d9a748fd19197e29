"""Tests for the 17-significant-digit number formatter."""

import math

import pytest

from lpfcalc.services._helpers import ROUND_TRIP_DIGITS, format_significant


class TestFormatSignificant:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.1, "0.10000000000000001"),
            (0.5, "0.5"),
            (100.0, "100"),
            (1.0, "1"),
            (-0.25, "-0.25"),
            (0.0, "0"),
            (-0.0, "0"),
            (1e21, "1e+21"),
            (1e16, "10000000000000000"),
            (1e17, "1e+17"),
            (0.000001, "9.9999999999999995e-7"),
            (0.00001, "0.000010000000000000001"),
        ],
    )
    def test_matches_to_precision_17(self, value: float, expected: str) -> None:
        assert format_significant(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value: float) -> None:
        assert format_significant(value) == "NaN"

    @pytest.mark.parametrize(
        "value",
        [
            0.24523727525278557,
            -0.5095254494944288,
            1 / 3,
            math.pi * 1e-9,
            6.02214076e23,
            5e-324,
            1.7976931348623157e308,
        ],
    )
    def test_round_trips(self, value: float) -> None:
        assert float(format_significant(value)) == value

    def test_integer_fixed_notation_keeps_zeros(self) -> None:
        """Trailing zeros are trimmed only after a decimal point."""
        assert format_significant(2500.0) == "2500"

    def test_fewer_digits(self) -> None:
        assert format_significant(math.pi, digits=5) == "3.1416"

    def test_default_digits(self) -> None:
        assert ROUND_TRIP_DIGITS == 17
