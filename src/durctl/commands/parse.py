"""Command: parse one or more ISO 8601 durations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.commands._base import DurCommand

if TYPE_CHECKING:
    from durctl.commands._context import AppContext


@click.command(
    cls=DurCommand,
    examples="""\
        durctl parse P1Y2M3DT4H5M6.5S
        durctl parse PT2.5H
        durctl parse -- -P3W1D
        durctl --json parse P1D PT36H P1Y
        durctl parse --partial P1D nonsense PT1M
        durctl parse --lenient "P1D trailing text"
    """,
)
@click.argument("texts", nargs=-1, required=True)
@click.option("--lenient", is_flag=True, help="Ignore text after the duration instead of failing.")
@click.option("--partial", is_flag=True, help="With several inputs, skip invalid ones.")
@click.pass_obj
def parse(app: AppContext, texts: tuple[str, ...], lenient: bool, partial: bool) -> None:
    """Parse ISO 8601 durations into normalized fields.

    Use ``--`` before a duration that starts with a minus sign.
    """
    service = app.durations
    if len(texts) == 1:
        app.emit(service.parse(texts[0], lenient=lenient))
    else:
        app.emit(service.parse_batch(list(texts), partial=partial, lenient=lenient))
