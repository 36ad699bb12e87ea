"""Grammar-sequence reader: a single left-to-right walk over TokenSpecs.

The duration grammar is a fixed, ordered tuple of specs.  Each spec
resolves to exactly one :class:`Outcome` and the walk never backtracks:

- ``OPTIONAL`` spec: on a miss, emit its default token and move on
  without consuming input.
- ``TRUNCATING`` spec: on a miss, stop the walk here.  Everything after
  it is abandoned and keeps its zero default downstream.
- ``REQUIRED`` spec: on a miss, the walk fails.

The time separator is ``TRUNCATING``: ``P1D`` has no time portion, and
the abandoned hour/minute/second specs all default to zero, which is
the identity for the assembler.  Reordering the grammar or giving the
time specs non-zero defaults would break that.

``M`` is read as months before the time separator and as minutes after
it, purely because of its slot in :data:`DURATION_GRAMMAR`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from durctl.domain.designators import Designator, match_at
from durctl.domain.literals import read_decimal, read_integer
from durctl.domain.tokens import (
    DaysToken,
    DesignatorToken,
    HoursToken,
    MinutesToken,
    MonthsToken,
    SecondsToken,
    SignToken,
    Token,
    WeeksToken,
    YearsToken,
    is_field_token,
)

logger = logging.getLogger(__name__)

type Reader = Callable[[str, int], tuple[Token, int] | None]


class SpecKind(StrEnum):
    """What a spec does when its reader misses."""

    OPTIONAL = "optional"
    TRUNCATING = "truncating"
    REQUIRED = "required"


class Outcome(StrEnum):
    """How a single spec was resolved during the walk."""

    MATCHED = "matched"
    DEFAULTED = "defaulted"
    TRUNCATED = "truncated"
    FAILED = "failed"


@dataclass(frozen=True)
class TokenSpec:
    """One slot of the grammar."""

    name: str
    reader: Reader
    kind: SpecKind = SpecKind.OPTIONAL
    default: Token | None = None

    def __post_init__(self) -> None:
        if self.kind is SpecKind.OPTIONAL and self.default is None:
            msg = f"Optional spec {self.name!r} needs a default token"
            raise ValueError(msg)


@dataclass(frozen=True)
class Step:
    """Resolution record for one spec."""

    spec: str
    outcome: Outcome
    position: int
    token: Token | None = None


@dataclass(frozen=True)
class SequenceResult:
    """Output of :func:`read_sequence`."""

    tokens: tuple[Token, ...]
    position: int
    steps: tuple[Step, ...]

    @property
    def failed(self) -> Step | None:
        """The step that failed the walk, if any."""
        last = self.steps[-1] if self.steps else None
        return last if last is not None and last.outcome is Outcome.FAILED else None

    @property
    def truncated(self) -> Step | None:
        """The step that truncated the walk, if any."""
        last = self.steps[-1] if self.steps else None
        return last if last is not None and last.outcome is Outcome.TRUNCATED else None

    @property
    def has_fields(self) -> bool:
        """Whether any unit value was actually read from the input."""
        return any(
            s.outcome is Outcome.MATCHED and s.token is not None and is_field_token(s.token)
            for s in self.steps
        )


def read_sequence(text: str, specs: Sequence[TokenSpec]) -> SequenceResult:
    """Walk *specs* over *text* once, left to right.

    Trailing input is not checked here; the returned ``position`` tells
    the caller how far the walk got.
    """
    tokens: list[Token] = []
    steps: list[Step] = []
    pos = 0

    for spec in specs:
        hit = spec.reader(text, pos)
        if hit is not None:
            token, pos = hit
            tokens.append(token)
            steps.append(Step(spec.name, Outcome.MATCHED, pos, token))
            continue

        if spec.kind is SpecKind.OPTIONAL:
            assert spec.default is not None
            tokens.append(spec.default)
            steps.append(Step(spec.name, Outcome.DEFAULTED, pos, spec.default))
            continue

        outcome = Outcome.TRUNCATED if spec.kind is SpecKind.TRUNCATING else Outcome.FAILED
        steps.append(Step(spec.name, outcome, pos))
        logger.debug("Grammar %s at %r (position %d)", outcome, spec.name, pos)
        break

    return SequenceResult(tokens=tuple(tokens), position=pos, steps=tuple(steps))


# --- Readers for the duration grammar ---


def _read_sign(text: str, pos: int) -> tuple[Token, int] | None:
    after = match_at(Designator.SIGN, text, pos)
    if after is None:
        return None
    return SignToken(negative=text[pos] == "-"), after


def _bare(designator: Designator) -> Reader:
    """Reader that consumes a lone designator character."""

    def read(text: str, pos: int) -> tuple[Token, int] | None:
        after = match_at(designator, text, pos)
        if after is None:
            return None
        return DesignatorToken(designator), after

    return read


def _integer(token_type: type, designator: Designator) -> Reader:
    def read(text: str, pos: int) -> tuple[Token, int] | None:
        hit = read_integer(text, pos, designator)
        if hit is None:
            return None
        value, after = hit
        return token_type(value), after

    return read


def _decimal(token_type: type, designator: Designator) -> Reader:
    def read(text: str, pos: int) -> tuple[Token, int] | None:
        hit = read_decimal(text, pos, designator)
        if hit is None:
            return None
        value, after = hit
        return token_type(value), after

    return read


_ZERO = Decimal(0)

DURATION_GRAMMAR: tuple[TokenSpec, ...] = (
    TokenSpec("sign", _read_sign, SpecKind.OPTIONAL, SignToken(negative=False)),
    TokenSpec("duration_start", _bare(Designator.DURATION_START), SpecKind.REQUIRED),
    TokenSpec("years", _integer(YearsToken, Designator.YEAR), default=YearsToken(0)),
    TokenSpec("months", _integer(MonthsToken, Designator.MONTH_OR_MINUTE), default=MonthsToken(0)),
    TokenSpec("weeks", _integer(WeeksToken, Designator.WEEK), default=WeeksToken(0)),
    TokenSpec("days", _integer(DaysToken, Designator.DAY), default=DaysToken(0)),
    TokenSpec("time_separator", _bare(Designator.TIME_SEPARATOR), SpecKind.TRUNCATING),
    TokenSpec("hours", _decimal(HoursToken, Designator.HOUR), default=HoursToken(_ZERO)),
    TokenSpec(
        "minutes",
        _decimal(MinutesToken, Designator.MONTH_OR_MINUTE),
        default=MinutesToken(_ZERO),
    ),
    TokenSpec("seconds", _decimal(SecondsToken, Designator.SECOND), default=SecondsToken(_ZERO)),
)
