"""Custom Click base class and shared filter options.

LpfCommand accepts an ``examples`` parameter; ``--examples`` prints them
and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class LpfCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def filter_options(func: _F) -> _F:
    """Apply the ``--order/--cutoff/--ts`` options shared by every command."""
    func = click.option(
        "--ts",
        "--sample-period",
        "sample_period",
        type=float,
        default=None,
        help="Sampling interval in seconds. Defaults to [design] sample_period.",
    )(func)
    func = click.option(
        "--cutoff",
        "--fc",
        "cutoff_hz",
        type=float,
        required=True,
        help="Cutoff (-3 dB) frequency in Hz.",
    )(func)
    func = click.option(
        "--order",
        type=click.Choice(["1", "2"]),
        default=None,
        help="Filter order. Defaults to [design] order.",
    )(func)
    return func
