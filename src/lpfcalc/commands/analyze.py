"""Command: design a filter and inspect its transfer function."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lpfcalc.commands._base import LpfCommand, filter_options

if TYPE_CHECKING:
    from lpfcalc.commands._context import AppContext


@click.command(
    cls=LpfCommand,
    examples="""\
  lpfcalc analyze --order 2 --cutoff 10 --ts 0.01
  lpfcalc analyze --order 1 --cutoff 10 --ts 0.01 --at 1 --at 20 --at 40
  lpfcalc --json analyze --cutoff 10 --ts 0.01""",
)
@filter_options
@click.option(
    "--at",
    "frequencies",
    type=float,
    multiple=True,
    help="Also report the gain at this frequency in Hz (repeatable).",
)
@click.pass_obj
def analyze(
    app: AppContext,
    order: str | None,
    cutoff_hz: float,
    sample_period: float | None,
    frequencies: tuple[float, ...],
) -> None:
    """Report poles, stability, DC gain, and magnitude response."""
    from lpfcalc.services.design import DesignService

    requested = [*app.settings.analysis.frequencies, *frequencies]
    app.emit(
        DesignService().analyze(
            app.resolve_order(order),
            cutoff_hz,
            app.resolve_sample_period(sample_period),
            frequencies=requested,
        )
    )
