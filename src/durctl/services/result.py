"""ServiceResult and ServiceError: what every durctl service method returns.

Services report bad input through a failed result instead of raising, so
the CLI can pick an exit code and output mode without catching domain
exceptions.  ``ok`` and ``error`` must agree; the model rejects a failed
result without an error and a successful one with an error.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Machine-readable failure: a stable ``code`` plus free-form ``detail``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"parse_duration"``, ``"instant_from_millis"``).
        data: Operation payload; validation results carry data even when the
            input was rejected.
        warnings: Non-fatal notes, such as ignored trailing input.
        error: Set exactly when ``ok`` is False.
        meta: Telemetry span tree when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> Self:
        if self.ok and self.error is not None:
            msg = f"{self.op}: a successful result cannot carry an error"
            raise ValueError(msg)
        if not self.ok and self.error is None:
            msg = f"{self.op}: a failed result needs an error"
            raise ValueError(msg)
        return self

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error, data=data or {})
