"""Designator catalog: the single-character markers of a duration.

Matching is case-insensitive and position-free.  ``M`` is one designator
(``MONTH_OR_MINUTE``); which unit it denotes is decided by where the
grammar asks for it, never by looking ahead.
"""

from __future__ import annotations

from enum import StrEnum


class Designator(StrEnum):
    """Closed set of duration designators."""

    SIGN = "sign"
    DURATION_START = "duration_start"
    YEAR = "year"
    MONTH_OR_MINUTE = "month_or_minute"
    WEEK = "week"
    DAY = "day"
    TIME_SEPARATOR = "time_separator"
    HOUR = "hour"
    SECOND = "second"


DESIGNATOR_CHARS: dict[Designator, frozenset[str]] = {
    Designator.SIGN: frozenset("+-"),
    Designator.DURATION_START: frozenset("Pp"),
    Designator.YEAR: frozenset("Yy"),
    Designator.MONTH_OR_MINUTE: frozenset("Mm"),
    Designator.WEEK: frozenset("Ww"),
    Designator.DAY: frozenset("Dd"),
    Designator.TIME_SEPARATOR: frozenset("Tt"),
    Designator.HOUR: frozenset("Hh"),
    Designator.SECOND: frozenset("Ss"),
}


def match(designator: Designator, char: str) -> bool:
    """Check whether *char* is a literal for *designator*.

    Examples:
        >>> match(Designator.YEAR, "y")
        True
        >>> match(Designator.SIGN, "+")
        True
        >>> match(Designator.HOUR, "M")
        False
    """
    return char in DESIGNATOR_CHARS[designator]


def match_at(designator: Designator, text: str, pos: int) -> int | None:
    """Match *designator* at ``text[pos]``.

    Returns the position after the consumed character, or None when the
    input is exhausted or the character does not match.
    """
    if pos < len(text) and match(designator, text[pos]):
        return pos + 1
    return None
