"""Command group: epoch instant conversions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.commands._base import DurGroup

if TYPE_CHECKING:
    from durctl.commands._context import AppContext


@click.group(
    cls=DurGroup,
    examples="""\
        durctl instant from-millis 1700000000000
        durctl instant from-nanos -- -1
        durctl --json instant from-millis 0
    """,
)
def instant() -> None:
    """Build epoch instants (range-checked to +/- 10^8 days)."""


@instant.command("from-millis")
@click.argument("millis", type=int)
@click.pass_obj
def from_millis(app: AppContext, millis: int) -> None:
    """Instant from milliseconds since the Unix epoch."""
    app.emit(app.instants.from_millis(millis))


@instant.command("from-nanos")
@click.argument("nanos", type=int)
@click.pass_obj
def from_nanos(app: AppContext, nanos: int) -> None:
    """Instant from nanoseconds since the Unix epoch."""
    app.emit(app.instants.from_nanoseconds(nanos))
