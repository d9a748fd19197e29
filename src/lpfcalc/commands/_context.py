"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Resolves configured defaults and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lpfcalc.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from lpfcalc.config.settings import LpfSettings
    from lpfcalc.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LpfSettings) -> None:
        self.settings = settings

        from lpfcalc.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from lpfcalc.services.telemetry import enable_telemetry

            enable_telemetry()

    def resolve_order(self, order: str | None) -> int:
        """``--order`` if given, else the configured default."""
        if order is None:
            return self.settings.design.order
        return int(order)

    def resolve_sample_period(self, sample_period: float | None) -> float:
        """``--ts`` if given, else ``[design] sample_period``.

        Raises:
            click.UsageError: Neither is set.
        """
        if sample_period is not None:
            return sample_period
        configured = self.settings.design.sample_period
        if configured is None:
            raise click.UsageError(
                "Missing option '--ts' (no [design] sample_period configured)."
            )
        return configured

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so piped
          coefficient output stays clean.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payloads already carry their warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
