"""Entry point for the ``durctl`` command."""

from __future__ import annotations

import click

from durctl import __version__
from durctl.commands import register_commands
from durctl.commands._context import AppContext
from durctl.config.settings import DurSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="durctl")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One-line results, errors only in logs.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and per-stage timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this durctl.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """durctl: parse and check ISO 8601 durations.

    Negative durations start with a minus sign; put ``--`` before them.
    """
    ctx.obj = AppContext(
        DurSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
