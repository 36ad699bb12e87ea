"""AppContext: the object every durctl command receives via ``@click.pass_obj``.

The root group builds it once from :class:`DurSettings`.  Building it sets
up logging (and span collection under ``--verbose``); commands then ask it
for services and hand the results back to :meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from durctl.config.settings import DurSettings
    from durctl.services.duration import DurationService
    from durctl.services.instant import InstantService
    from durctl.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: DurSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            show_zero_fields=settings.output.show_zero_fields,
        )

        from durctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

        if settings.verbose:
            from durctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def durations(self) -> DurationService:
        from durctl.services.duration import DurationService

        return DurationService(self.settings)

    @property
    def instants(self) -> InstantService:
        from durctl.services.instant import InstantService

        return InstantService(self.settings)

    def emit(self, result: ServiceResult, *, failed: bool | None = None) -> None:
        """Print *result* and exit 1 if it counts as a failure.

        Failed results go to stderr.  A successful result that still
        should fail the command (``check`` on an invalid duration) passes
        ``failed=True`` and is printed to stdout.  Warnings go to stderr
        except in JSON mode, where they are already in the payload.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if failed:
            raise SystemExit(1)
