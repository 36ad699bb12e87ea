"""Rich Console factory and theme for durctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DUR_THEME = Theme(
    {
        "dur.ok": "bold green",
        "dur.error": "bold red",
        "dur.warning": "bold yellow",
        "dur.op": "bold cyan",
        "dur.key": "dim",
        "dur.input": "bold",
        "dur.unit.calendar": "blue",
        "dur.unit.clock": "green",
        "dur.unit.subsecond": "magenta",
        "dur.sign": "bold yellow",
        "dur.valid": "bold green",
        "dur.invalid": "bold red",
    }
)

_UNIT_STYLES: dict[str, str] = {
    "years": "dur.unit.calendar",
    "months": "dur.unit.calendar",
    "weeks": "dur.unit.calendar",
    "days": "dur.unit.calendar",
    "hours": "dur.unit.clock",
    "minutes": "dur.unit.clock",
    "seconds": "dur.unit.clock",
    "milliseconds": "dur.unit.subsecond",
    "microseconds": "dur.unit.subsecond",
    "nanoseconds": "dur.unit.subsecond",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DUR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_unit(unit: str) -> str:
    """Return the Rich style name for a duration unit."""
    return _UNIT_STYLES.get(unit, "")
