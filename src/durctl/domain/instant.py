"""Instant: a point in time as nanoseconds since the Unix epoch.

The valid range is symmetric: at most 10**8 days either side of the
epoch, in nanoseconds.  Python ints are arbitrary precision, so no
overflow handling is needed.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

NS_PER_MS = 10**6
NS_PER_DAY = 86_400 * 10**9
NS_MAX = 10**8 * NS_PER_DAY
NS_MIN = -NS_MAX


def is_valid_epoch_nanoseconds(ns: int) -> bool:
    """Check whether *ns* lies inside the representable window."""
    return NS_MIN <= ns <= NS_MAX


class Instant(BaseModel):
    """An exact point on the UTC timeline."""

    model_config = {"frozen": True}

    epoch_nanoseconds: int

    @field_validator("epoch_nanoseconds")
    @classmethod
    def _check_range(cls, value: int) -> int:
        if not is_valid_epoch_nanoseconds(value):
            msg = f"Instant out of range: {value} ns (limit is +/-{NS_MAX})"
            raise ValueError(msg)
        return value

    @classmethod
    def from_epoch_milliseconds(cls, ms: int) -> Instant:
        """Build an Instant from whole milliseconds since the epoch."""
        return cls(epoch_nanoseconds=ms * NS_PER_MS)

    @property
    def epoch_milliseconds(self) -> int:
        """Milliseconds since the epoch, floored toward negative infinity."""
        return self.epoch_nanoseconds // NS_PER_MS
