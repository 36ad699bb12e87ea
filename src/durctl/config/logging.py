"""Route durctl's stdlib and structlog records through one stderr handler.

Parser internals log with ``logging.getLogger(__name__)``; the services'
telemetry logs through structlog.  Both end up in the same
``ProcessorFormatter`` so ``--log-json`` yields one JSON object per line
regardless of which API produced the record.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "durctl"


def level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``durctl`` logger tree; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _formatter(*, log_json: bool, stream: TextIO) -> structlog.stdlib.ProcessorFormatter:
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install the durctl handler on the root logger.

    Safe to call repeatedly: each call replaces the root handlers, so a CLI
    invocation never stacks output.

    Args:
        verbose: DEBUG for ``durctl.*`` (grammar traces, span timings).
        quiet: Only ERROR and above for ``durctl.*``.
        log_json: One JSON object per record instead of console lines.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    target = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(_formatter(log_json=log_json, stream=target))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(level_for(verbose=verbose, quiet=quiet))
