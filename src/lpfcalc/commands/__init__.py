"""Subcommand modules for lpfcalc.

Provides register_commands(), which uses deferred imports so
``lpfcalc --help`` never loads numpy or scipy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from lpfcalc.commands.analyze import analyze
    from lpfcalc.commands.design import design

    cli.add_command(design)
    cli.add_command(analyze)
