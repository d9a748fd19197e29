"""Command: derive low-pass filter coefficients."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lpfcalc.commands._base import LpfCommand, filter_options

if TYPE_CHECKING:
    from lpfcalc.commands._context import AppContext


@click.command(
    cls=LpfCommand,
    examples="""\
  lpfcalc design --order 1 --cutoff 10 --ts 0.01
  lpfcalc design --order 2 --cutoff 50 --ts 0.001
  lpfcalc -q design --cutoff 5 --ts 0.002
  lpfcalc --json design --order 2 --fc 100 --sample-period 1e-4""",
)
@filter_options
@click.pass_obj
def design(
    app: AppContext,
    order: str | None,
    cutoff_hz: float,
    sample_period: float | None,
) -> None:
    """Compute bilinear-transform low-pass coefficients (order 1 or 2)."""
    from lpfcalc.services.design import DesignService

    app.emit(
        DesignService().design(
            app.resolve_order(order),
            cutoff_hz,
            app.resolve_sample_period(sample_period),
        )
    )
