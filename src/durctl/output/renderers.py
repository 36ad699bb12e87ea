"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from durctl.domain.models import DURATION_FIELDS
from durctl.output.console import create_console, get_output, style_for_unit

if TYPE_CHECKING:
    from rich.console import Console

    from durctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_zero_fields=show_zero_fields)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "validate_duration":
        return "valid" if result.data.get("valid") else "invalid"
    if "epoch_nanoseconds" in result.data:
        return str(result.data["epoch_nanoseconds"])
    if result.op == "parse_batch":
        items = result.data.get("items", [])
        errors = result.data.get("errors", [])
        return f"{len(items)} parsed, {len(errors)} invalid"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


# Wider ints are shown in scientific notation; str() refuses them past the
# interpreter's digit limit.
_PLAIN_INT_BITS = 256


def _number(value: Any) -> str:
    """Display text for a field value."""
    if isinstance(value, int) and not isinstance(value, bool):
        if value.bit_length() > _PLAIN_INT_BITS:
            return f"{Decimal(value):.6e}"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dur.ok")
    op = Text(f"  {result.op}", style="dur.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dur.key")
    style = "dur.input" if key == "input" else style_for_unit(key)
    v = Text(_number(value), style=style)
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
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
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"

    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line += f"  ({extras})"

    if span_data.get("error"):
        line += f"  [dur.error]!{span_data['error']}[/dur.error]"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _duration_table(duration: dict[str, Any], *, show_zero_fields: bool = False) -> Table | None:
    """Build a unit/value table; None when there is nothing to show."""
    rows = [
        (name, duration.get(name, 0))
        for name in DURATION_FIELDS
        if show_zero_fields or duration.get(name, 0)
    ]
    if not rows:
        return None

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Unit")
    table.add_column("Value", justify="right")
    for name, value in rows:
        table.add_row(Text(name, style=style_for_unit(name)), _number(value))
    return table


def _sign_text(duration: dict[str, Any]) -> Text:
    if duration.get("is_negative"):
        return Text("negative", style="dur.sign")
    return Text("positive")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dur.error")
    op = Text(f"  {result.op}", style="dur.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err and err.detail:
        reason = err.detail.get("reason")
        if reason:
            console.print(Text(f"  reason: {reason}", style="dim"))
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Duration renderers ────────────────────────────────────────────────


def _render_duration(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> None:
    """Render parse_duration results as a unit table."""
    _status_line(console, result)
    duration = result.data.get("duration", {})
    _field(console, "input", result.data.get("input", ""))
    console.print(Text("  sign: ", style="dur.key"), _sign_text(duration), end="")
    console.print()

    table = _duration_table(duration, show_zero_fields=show_zero_fields)
    if table is None:
        console.print(Text("  (zero duration)", style="dim"))
    else:
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_batch(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> None:
    """Render parse_batch results: one row per input."""
    _status_line(console, result)
    items = result.data.get("items", [])
    errors = result.data.get("errors", [])
    _field(console, "parsed", len(items))
    _field(console, "errors", len(errors))

    if items:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Input", style="dur.input")
        table.add_column("Sign")
        for name in DURATION_FIELDS:
            if show_zero_fields or any(item["duration"].get(name) for item in items):
                table.add_column(name, justify="right", style=style_for_unit(name))
        columns = [c.header for c in table.columns[3:]]
        for item in items:
            d = item["duration"]
            row: list[str | Text] = [str(item["index"]), Text(item["input"]), _sign_text(d)]
            row.extend(_number(d.get(name, 0)) for name in columns)
            table.add_row(*row)
        console.print(table)

    for err in errors:
        idx = err.get("index")
        msg = err.get("error")
        console.print(f"  [dur.error]error[/dur.error] index={idx}: {escape(str(msg))}")

    if verbose:
        _render_meta(console, result)


def _render_validate(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> None:
    """Render validate_duration as a single verdict line."""
    d = result.data
    if d.get("valid"):
        verdict = Text("VALID", style="dur.valid")
    else:
        verdict = Text("INVALID", style="dur.invalid")
    console.print(verdict, Text(f"  {d.get('input', '')}", style="dur.input"))
    if not d.get("valid"):
        _field(console, "reason", d.get("reason"))
        if d.get("position") is not None:
            _field(console, "position", d["position"])
    if verbose:
        _render_meta(console, result)


def _render_instant(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> None:
    _status_line(console, result)
    for key in ("epoch_nanoseconds", "epoch_milliseconds"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_zero_fields: bool = False,
) -> None:
    """Fallback: status line plus flat key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "parse_duration": _render_duration,
    "parse_batch": _render_batch,
    "validate_duration": _render_validate,
    "instant_from_millis": _render_instant,
    "instant_from_nanoseconds": _render_instant,
}
