"""Fractional normalizer: single-fraction rule and subunit cascade.

Only the least significant time unit present may carry a fraction, and
every finer unit (as parsed) must be zero.  A fractional hour, minute
or second is carried down with exact rational arithmetic:

    hours -> minutes -> seconds  (x 60)
    seconds -> ms -> us -> ns    (x 1000)

Each subunit takes the floor of the scaled remainder, so the carried
value can never overshoot into the next larger unit.  Whatever is left
below one nanosecond is discarded.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

from durctl.domain.errors import FailureReason, InvalidDurationError
from durctl.domain.models import Duration, RawDuration

# Cascade path for each time unit: (subunit, scale factor) pairs.
_CASCADES: dict[str, tuple[tuple[str, int], ...]] = {
    "hours": (
        ("minutes", 60),
        ("seconds", 60),
        ("milliseconds", 1000),
        ("microseconds", 1000),
        ("nanoseconds", 1000),
    ),
    "minutes": (
        ("seconds", 60),
        ("milliseconds", 1000),
        ("microseconds", 1000),
        ("nanoseconds", 1000),
    ),
    "seconds": (
        ("milliseconds", 1000),
        ("microseconds", 1000),
        ("nanoseconds", 1000),
    ),
}

# Units that must be exactly zero when the key unit is fractional.
_FINER_UNITS: dict[str, tuple[str, ...]] = {
    "hours": ("minutes", "seconds"),
    "minutes": ("seconds",),
    "seconds": (),
}


def is_set(value: Decimal) -> bool:
    return value != 0


def is_regular(value: Decimal) -> bool:
    """True when *value* has no fractional part."""
    return Fraction(value).denominator == 1


def cascade(value: Fraction, factors: tuple[int, ...]) -> list[int]:
    """Split *value* into its whole part followed by floored subunits.

    Examples:
        >>> cascade(Fraction(5, 2), (60, 60))
        [2, 30, 0]
    """
    whole = math.floor(value)
    parts = [whole]
    remainder = value - whole
    for factor in factors:
        scaled = remainder * factor
        unit = math.floor(scaled)
        parts.append(unit)
        remainder = scaled - unit
    return parts


def normalize(raw: RawDuration, *, source: str = "") -> Duration:
    """Convert a RawDuration into an all-integer Duration.

    Raises:
        InvalidDurationError: If more than one time unit is fractional,
            or a fractional unit is followed by a non-zero finer unit.
            *source* is the original text, used for the error only.
    """
    fields: dict[str, int] = {
        "years": raw.years,
        "months": raw.months,
        "weeks": raw.weeks,
        "days": raw.days,
    }

    for unit in ("hours", "minutes", "seconds"):
        value: Decimal = getattr(raw, unit)
        if not is_set(value):
            fields.setdefault(unit, 0)
            continue
        if is_regular(value):
            fields[unit] = int(value)
            continue

        if any(getattr(raw, finer) != 0 for finer in _FINER_UNITS[unit]):
            raise InvalidDurationError(source, reason=FailureReason.FRACTIONAL_UNIT)

        chain = _CASCADES[unit]
        parts = cascade(Fraction(value), tuple(factor for _, factor in chain))
        fields[unit] = parts[0]
        for (subunit, _), part in zip(chain, parts[1:], strict=True):
            fields[subunit] = part

    return Duration(is_negative=raw.is_negative, **fields)
