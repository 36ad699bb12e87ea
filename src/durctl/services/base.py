"""BaseService: common foundation for durctl services.

Every service receives a :class:`DurSettings` at construction time and
derives its parser policy from it.  Services never raise for bad input;
they return a failed :class:`ServiceResult` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from durctl.domain.errors import InvalidDurationError
from durctl.services.result import ServiceError

if TYPE_CHECKING:
    from durctl.config.settings import DurSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DurationService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                options = self._settings.parse_options()
                ...
    """

    def __init__(self, settings: DurSettings | None = None) -> None:
        if settings is None:
            from durctl.config.settings import DurSettings

            settings = DurSettings()
        self._settings = settings

    @property
    def settings(self) -> DurSettings:
        return self._settings

    @staticmethod
    def _duration_error(exc: InvalidDurationError) -> ServiceError:
        """Translate a domain parse failure into a ServiceError."""
        return ServiceError(
            code="INVALID_DURATION",
            message=str(exc),
            detail={
                "text": exc.text,
                "reason": str(exc.reason),
                "position": exc.position,
            },
        )
