"""``parse_duration``: text in, :class:`Duration` out.

Pipeline: grammar walk -> acceptance checks -> assemble -> normalize.
The function is pure; the same text always yields the same result.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from durctl.domain.assembler import assemble
from durctl.domain.errors import FailureReason, InvalidDurationError
from durctl.domain.grammar import DURATION_GRAMMAR, SequenceResult, read_sequence
from durctl.domain.models import Duration
from durctl.domain.normalize import normalize

logger = logging.getLogger(__name__)


class ParseOptions(BaseModel):
    """Acceptance policy for input the grammar walk alone does not reject.

    Attributes:
        allow_trailing: Discard text left over after the grammar walk
            instead of failing.
        allow_empty: Accept a duration with no unit components
            (``"P"``, ``"PT"``) as the zero duration.
    """

    model_config = {"frozen": True}

    allow_trailing: bool = False
    allow_empty: bool = False


STRICT = ParseOptions()


def check_sequence(text: str, sequence: SequenceResult, options: ParseOptions) -> None:
    """Apply the acceptance policy to a finished grammar walk.

    Raises:
        InvalidDurationError: If the walk failed, stopped short of the
            end of *text* (unless allowed), or read no unit at all
            (unless allowed).
    """
    failed = sequence.failed
    if failed is not None:
        raise InvalidDurationError(text, reason=FailureReason.SYNTAX, position=failed.position)

    if sequence.position < len(text):
        if not options.allow_trailing:
            raise InvalidDurationError(
                text,
                reason=FailureReason.UNEXPECTED_INPUT,
                position=sequence.position,
            )
        logger.debug(
            "Discarding %d trailing character(s) of %r",
            len(text) - sequence.position,
            text,
        )

    if not sequence.has_fields and not options.allow_empty:
        raise InvalidDurationError(text, reason=FailureReason.EMPTY, position=sequence.position)


def parse_duration(text: str, *, options: ParseOptions | None = None) -> Duration:
    """Parse an ISO 8601 duration such as ``P1Y2M3DT4H5M6.5S``.

    Accepts an optional leading ``+``/``-`` and combined week and day
    units (ISO 8601-2).  Designators are case-insensitive and ``,``
    is accepted as the decimal separator.

    Raises:
        InvalidDurationError: For any syntactic or semantic failure.

    Examples:
        >>> parse_duration("PT2.5H").minutes
        30
        >>> parse_duration("-P1Y").is_negative
        True
    """
    sequence = read_sequence(text, DURATION_GRAMMAR)
    check_sequence(text, sequence, options or STRICT)
    return normalize(assemble(sequence.tokens), source=text)
