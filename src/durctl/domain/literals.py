"""Numeric literal readers.

Both readers scan greedily from a position, then require a terminating
designator immediately after the digit run.  The designator is consumed
along with the number.  On failure nothing is consumed (the reader
returns None and the caller keeps its own position).
"""

from __future__ import annotations

from decimal import Decimal

from durctl.domain.designators import Designator, match_at

DIGITS = frozenset("0123456789")
DECIMAL_SEPARATORS = frozenset(".,")


def scan_digits(text: str, pos: int) -> int:
    """Return the end of the ASCII digit run starting at *pos*."""
    end = pos
    while end < len(text) and text[end] in DIGITS:
        end += 1
    return end


def scan_decimal(text: str, pos: int) -> int:
    """Return the end of a digit run with at most one decimal separator.

    A separator is only taken after at least one digit, so ``.5`` scans
    as empty.  Scanning stops at the second separator.
    """
    end = scan_digits(text, pos)
    if end > pos and end < len(text) and text[end] in DECIMAL_SEPARATORS:
        end = scan_digits(text, end + 1)
    return end


def read_integer(text: str, pos: int, designator: Designator) -> tuple[int, int] | None:
    """Read ``<digits><designator>`` at *pos*.

    Returns ``(value, next_pos)`` or None.  The digits go through
    ``Decimal`` so runs longer than the interpreter's int-from-str digit
    limit still convert exactly.

    Examples:
        >>> read_integer("12Y", 0, Designator.YEAR)
        (12, 3)
        >>> read_integer("12M", 0, Designator.YEAR) is None
        True
    """
    end = scan_digits(text, pos)
    if end == pos:
        return None
    after = match_at(designator, text, end)
    if after is None:
        return None
    return int(Decimal(text[pos:end])), after


def read_decimal(text: str, pos: int, designator: Designator) -> tuple[Decimal, int] | None:
    """Read ``<digits>[(.|,)<digits>]<designator>`` at *pos*.

    ``.`` and ``,`` are equivalent decimal separators.

    Examples:
        >>> read_decimal("1,5S", 0, Designator.SECOND)
        (Decimal('1.5'), 4)
    """
    end = scan_decimal(text, pos)
    if end == pos:
        return None
    after = match_at(designator, text, end)
    if after is None:
        return None
    literal = text[pos:end].replace(",", ".")
    return Decimal(literal), after
