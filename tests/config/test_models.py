"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from lpfcalc.config.models import AnalysisConfig, DesignConfig


class TestDesignConfig:
    def test_defaults(self) -> None:
        cfg = DesignConfig()
        assert cfg.order == 2
        assert cfg.sample_period is None

    def test_order_one(self) -> None:
        assert DesignConfig(order=1).order == 1

    @pytest.mark.parametrize("order", [0, 3])
    def test_rejects_other_orders(self, order: int) -> None:
        with pytest.raises(ValidationError):
            DesignConfig(order=order)  # type: ignore[arg-type]

    @pytest.mark.parametrize("period", [0.0, -0.01])
    def test_rejects_non_positive_period(self, period: float) -> None:
        with pytest.raises(ValidationError):
            DesignConfig(sample_period=period)

    def test_frozen(self) -> None:
        cfg = DesignConfig()
        with pytest.raises(ValidationError):
            cfg.order = 1  # type: ignore[misc]


class TestAnalysisConfig:
    def test_defaults(self) -> None:
        assert AnalysisConfig().frequencies == []

    def test_coerces_ints(self) -> None:
        cfg = AnalysisConfig(frequencies=[1, 2.5])  # type: ignore[list-item]
        assert cfg.frequencies == [1.0, 2.5]
