"""ServiceResult and ServiceError: what every design operation returns.

Validation failures travel as data (``ok=False`` plus an error code),
never as exceptions, so the CLI decides exit codes and formatting.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was rejected.

    ``code`` is a stable identifier such as ``NON_POSITIVE_CUTOFF``;
    ``detail`` carries the offending or derived values.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of ``DesignService.design`` or ``DesignService.analyze``.

    Attributes:
        ok: False when the request was rejected.
        op: ``"design"`` or ``"analyze"``.
        data: Coefficients (and analysis figures) on success.
        warnings: Inputs that were skipped or figures that are undefined.
        error: Set exactly when ``ok`` is False.
        meta: Span timings under ``"telemetry"`` when run with ``-v``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
