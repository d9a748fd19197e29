"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.

Every coefficient is printed with 17 significant digits so the text
round-trips to the exact double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from lpfcalc.output.console import create_console, get_output
from lpfcalc.services._helpers import format_significant

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from lpfcalc.services.result import ServiceResult

COEFFICIENT_KEYS = ("n0", "n1", "n2", "d1", "d2")

RECURRENCE = "y[k] = N0*x[k] + N1*x[k-1] + N2*x[k-2] - D1*y[k-1] - D2*y[k-2]"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Success prints only the copy-friendly coefficient block.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return coefficient_block(result.data)


def coefficient_block(data: Mapping[str, Any]) -> str:
    """Copy-friendly ``N0 = ...,`` block, one coefficient per line."""
    lines = [f"{key.upper()} = {format_significant(data[key])}" for key in COEFFICIENT_KEYS]
    return ",\n".join(lines)


def design_title(data: Mapping[str, Any]) -> str:
    """One-line summary, e.g. ``10 Hz LPF (order 2) with Ts = 0.01 s (Fs = 100 Hz)``."""
    return (
        f"{format_significant(data['cutoff_hz'])} Hz LPF (order {data['order']}) "
        f"with Ts = {format_significant(data['sample_period'])} s "
        f"(Fs = {format_significant(data['sample_rate_hz'])} Hz)"
    )


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "lpf.ok"), (f"  {result.op}", "lpf.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if isinstance(value, float):
        value = format_significant(value)
    console.print(Text.assemble((f"  {key}: ", "lpf.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a span and its children with millisecond timings."""
    prefix = " " * indent
    line = Text(prefix)
    line.append(f"{span_data.get('duration_ms', 0.0):>8.3f}ms", style="dim")
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "lpf.error"), (f"  {result.op}", "lpf.op"), f" — {msg}")
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                shown = format_significant(v) if isinstance(v, float) else v
                console.print(Text(f"    {k}: {shown}"))


# ── Design renderers ──────────────────────────────────────────────────


def _coefficient_table(data: Mapping[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Coefficient", style="lpf.key")
    table.add_column("Value", style="lpf.coef", justify="right", no_wrap=True)
    for key in COEFFICIENT_KEYS:
        table.add_row(key.upper(), format_significant(data[key]))
    return table


def _render_design(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Title, coefficient table, recurrence, and copy block."""
    d = result.data
    _status_line(console, result)
    console.print(Text(f"  {design_title(d)}", style="lpf.title"))
    console.print()
    console.print(_coefficient_table(d))
    console.print()
    console.print(Text(f"  {RECURRENCE}", style="dim"))

    if verbose:
        console.print()
        _field(console, "sample_rate_hz", d["sample_rate_hz"], style="lpf.freq")
        _field(console, "nyquist_hz", d["nyquist_hz"], style="lpf.freq")

    console.print()
    console.print(Text(coefficient_block(d)))

    if verbose:
        _render_meta(console, result)


def _render_analyze(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Design summary plus poles, stability, DC gain, and response table."""
    d = result.data
    _status_line(console, result)
    console.print(Text(f"  {design_title(d)}", style="lpf.title"))
    console.print()
    console.print(_coefficient_table(d))
    console.print()

    stable = bool(d["stable"])
    _field(
        console,
        "stable",
        "yes" if stable else "no",
        style="lpf.stable" if stable else "lpf.unstable",
    )
    _field(console, "dc_gain", d["dc_gain"])
    _field(console, "cutoff_gain_db", f"{d['cutoff_gain_db']:.4f}")
    _field(console, "nyquist_hz", d["nyquist_hz"], style="lpf.freq")

    poles = Table(show_header=True, pad_edge=False, expand=False, title="Poles")
    poles.add_column("Real", justify="right")
    poles.add_column("Imag", justify="right")
    poles.add_column("|p|", justify="right")
    for pole in d["poles"]:
        poles.add_row(
            format_significant(pole["real"]),
            format_significant(pole["imag"]),
            format_significant(pole["magnitude"]),
        )
    console.print()
    console.print(poles)

    if d["response"]:
        response = Table(show_header=True, pad_edge=False, expand=False, title="Response")
        response.add_column("Frequency (Hz)", style="lpf.freq", justify="right")
        response.add_column("Gain (dB)", justify="right")
        for point in d["response"]:
            response.add_row(format_significant(point["frequency_hz"]), f"{point['gain_db']:.4f}")
        console.print()
        console.print(response)

    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "design": _render_design,
    "analyze": _render_analyze,
}
