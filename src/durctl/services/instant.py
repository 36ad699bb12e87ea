"""InstantService: build epoch instants from millisecond or nanosecond counts."""

from __future__ import annotations

from pydantic import ValidationError

from durctl.domain.instant import NS_MAX, Instant
from durctl.services.base import BaseService
from durctl.services.result import ServiceResult
from durctl.services.telemetry import traced


class InstantService(BaseService):
    """Range-checked conversions for :class:`Instant`."""

    @staticmethod
    def _payload(instant: Instant) -> dict[str, int]:
        return {
            "epoch_nanoseconds": instant.epoch_nanoseconds,
            "epoch_milliseconds": instant.epoch_milliseconds,
        }

    @staticmethod
    def _out_of_range(op: str, value: int, unit: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "INSTANT_OUT_OF_RANGE",
            f"{value} {unit} is outside the representable range",
            detail={"value": value, "unit": unit, "limit_ns": NS_MAX},
        )

    @traced
    def from_millis(self, ms: int) -> ServiceResult:
        op = "instant_from_millis"
        try:
            instant = Instant.from_epoch_milliseconds(ms)
        except ValidationError:
            return self._out_of_range(op, ms, "ms")
        return ServiceResult.success(op, self._payload(instant))

    @traced
    def from_nanoseconds(self, ns: int) -> ServiceResult:
        op = "instant_from_nanoseconds"
        try:
            instant = Instant(epoch_nanoseconds=ns)
        except ValidationError:
            return self._out_of_range(op, ns, "ns")
        return ServiceResult.success(op, self._payload(instant))
