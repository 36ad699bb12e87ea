"""Subcommand modules for durctl.

Provides register_commands() which uses deferred imports to keep
``durctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    from durctl.commands.check import check
    from durctl.commands.instant import instant
    from durctl.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
    cli.add_command(instant)
