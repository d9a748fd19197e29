"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lpfcalc.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DesignConfig(BaseModel):
    """[design] section."""

    model_config = {"frozen": True}

    order: int = Field(default=2, ge=1, le=2)
    sample_period: float | None = Field(default=None, gt=0)


class AnalysisConfig(BaseModel):
    """[analysis] section."""

    model_config = {"frozen": True}

    frequencies: list[float] = Field(default_factory=list)
