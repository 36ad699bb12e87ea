"""Command: check whether a string is a valid duration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.commands._base import DurCommand

if TYPE_CHECKING:
    from durctl.commands._context import AppContext


@click.command(
    cls=DurCommand,
    examples="""\
        durctl check PT1H30M
        durctl -q check PT1.5H30M
        durctl --json check P
    """,
)
@click.argument("text")
@click.pass_obj
def check(app: AppContext, text: str) -> None:
    """Validate TEXT; exits with status 1 when it is not a duration."""
    result = app.durations.validate(text)
    app.emit(result, failed=not result.data.get("valid"))
