"""durctl: ISO 8601 duration parsing library and CLI."""

from __future__ import annotations

from durctl.domain.errors import FailureReason, InvalidDurationError
from durctl.domain.instant import Instant
from durctl.domain.models import Duration
from durctl.domain.parser import ParseOptions, parse_duration

__version__ = "0.3.0"

__all__ = [
    "Duration",
    "FailureReason",
    "Instant",
    "InvalidDurationError",
    "ParseOptions",
    "__version__",
    "parse_duration",
]
