"""The single parse failure kind and its optional enrichment.

Every failure (syntax or semantics) is an :class:`InvalidDurationError`.
``reason`` and ``position`` are informational only.
"""

from __future__ import annotations

from enum import StrEnum


class FailureReason(StrEnum):
    """Why a duration was rejected."""

    SYNTAX = "syntax"
    UNEXPECTED_INPUT = "unexpected_input"
    EMPTY = "empty"
    FRACTIONAL_UNIT = "fractional_unit"


class InvalidDurationError(ValueError):
    """Raised when text is not a valid ISO 8601 duration."""

    def __init__(
        self,
        text: str,
        *,
        reason: FailureReason = FailureReason.SYNTAX,
        position: int | None = None,
    ) -> None:
        self.text = text
        self.reason = reason
        self.position = position
        msg = f"Invalid duration: {text!r}"
        if position is not None:
            msg += f" (at position {position})"
        super().__init__(msg)
