"""Rich Console factory and theme for lpfcalc output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LPF_THEME = Theme(
    {
        "lpf.ok": "bold green",
        "lpf.error": "bold red",
        "lpf.warning": "bold yellow",
        "lpf.op": "bold cyan",
        "lpf.key": "dim",
        "lpf.title": "bold",
        "lpf.coef": "bold blue",
        "lpf.freq": "magenta",
        "lpf.stable": "green",
        "lpf.unstable": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=LPF_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
