"""Fold a token stream into a :class:`RawDuration`."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from durctl.domain.models import RawDuration
from durctl.domain.tokens import SignToken, Token, is_field_token


def assemble(tokens: Iterable[Token]) -> RawDuration:
    """Fold *tokens*, in stream order, into a RawDuration.

    Designator tokens and a positive sign are no-ops.  Only a negative
    sign touches ``is_negative``.

    Examples:
        >>> from durctl.domain.tokens import SignToken, YearsToken
        >>> raw = assemble([SignToken(negative=True), YearsToken(2)])
        >>> raw.is_negative, raw.years
        (True, 2)
    """
    raw = RawDuration()
    for token in tokens:
        if isinstance(token, SignToken):
            if token.negative:
                raw = replace(raw, is_negative=True)
        elif is_field_token(token):
            raw = replace(raw, **{token.field: token.value})  # type: ignore[union-attr]
    return raw
