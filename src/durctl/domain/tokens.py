"""Token stream produced by the grammar walk.

A token is one of a small closed family of frozen dataclasses.  Field
tokens carry a ``field`` class attribute naming the RawDuration field
they write; structural tokens (sign, bare designators) carry none.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from durctl.domain.designators import Designator


@dataclass(frozen=True)
class SignToken:
    """Leading ``+`` or ``-``."""

    negative: bool = False


@dataclass(frozen=True)
class DesignatorToken:
    """A bare designator (``P`` or ``T``); structural, writes nothing."""

    designator: Designator


@dataclass(frozen=True)
class YearsToken:
    field: ClassVar[str] = "years"
    value: int = 0


@dataclass(frozen=True)
class MonthsToken:
    field: ClassVar[str] = "months"
    value: int = 0


@dataclass(frozen=True)
class WeeksToken:
    field: ClassVar[str] = "weeks"
    value: int = 0


@dataclass(frozen=True)
class DaysToken:
    field: ClassVar[str] = "days"
    value: int = 0


@dataclass(frozen=True)
class HoursToken:
    field: ClassVar[str] = "hours"
    value: Decimal = Decimal(0)


@dataclass(frozen=True)
class MinutesToken:
    field: ClassVar[str] = "minutes"
    value: Decimal = Decimal(0)


@dataclass(frozen=True)
class SecondsToken:
    field: ClassVar[str] = "seconds"
    value: Decimal = Decimal(0)


type FieldToken = (
    YearsToken
    | MonthsToken
    | WeeksToken
    | DaysToken
    | HoursToken
    | MinutesToken
    | SecondsToken
)
type Token = SignToken | DesignatorToken | FieldToken

FIELD_TOKEN_TYPES: tuple[type, ...] = (
    YearsToken,
    MonthsToken,
    WeeksToken,
    DaysToken,
    HoursToken,
    MinutesToken,
    SecondsToken,
)


def is_field_token(token: Token) -> bool:
    """Check whether *token* carries a unit value."""
    return isinstance(token, FIELD_TOKEN_TYPES)
