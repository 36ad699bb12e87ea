"""Duration value types.

``RawDuration`` is the assembler's intermediate: integer calendar units
and exact decimal time units, straight from the text.  ``Duration`` is
the normalized public value: every field a non-negative integer, with
one sign for the whole duration.

INVARIANT: both types are immutable.  New values are built with
``dataclasses.replace`` or constructed once from a complete field set.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, Field

_ZERO = Decimal(0)

DURATION_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)


@dataclass(frozen=True)
class RawDuration:
    """Pre-normalization duration, as parsed."""

    is_negative: bool = False
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: Decimal = _ZERO
    minutes: Decimal = _ZERO
    seconds: Decimal = _ZERO


class Duration(BaseModel):
    """A normalized, signed ISO 8601 duration.

    The sign applies to the duration as a whole; individual fields are
    never negative.
    """

    model_config = {"frozen": True}

    is_negative: bool = False
    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    weeks: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    milliseconds: int = Field(default=0, ge=0)
    microseconds: int = Field(default=0, ge=0)
    nanoseconds: int = Field(default=0, ge=0)

    @property
    def is_zero(self) -> bool:
        """True when every unit field is zero (the sign is ignored)."""
        return all(getattr(self, name) == 0 for name in DURATION_FIELDS)

    def fields(self) -> dict[str, int]:
        """Unit fields in canonical order, without the sign."""
        return {name: getattr(self, name) for name in DURATION_FIELDS}
