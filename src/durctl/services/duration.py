"""DurationService: parse, batch-parse, and validate duration text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from durctl.domain.assembler import assemble
from durctl.domain.errors import InvalidDurationError
from durctl.domain.grammar import DURATION_GRAMMAR, read_sequence
from durctl.domain.models import Duration
from durctl.domain.normalize import normalize
from durctl.domain.parser import ParseOptions, check_sequence
from durctl.services.base import BaseService
from durctl.services.result import ServiceResult
from durctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class DurationService(BaseService):
    """Parses ISO 8601 duration text under the configured parser policy."""

    def _parse_one(self, text: str, options: ParseOptions) -> tuple[Duration, int]:
        """Run the parse pipeline stage by stage so each stage gets a span.

        Returns the duration and the number of characters consumed.
        """
        with trace_span("grammar") as span:
            sequence = read_sequence(text, DURATION_GRAMMAR)
            if span:
                span.annotate("tokens", len(sequence.tokens))
                span.annotate("consumed", sequence.position)
        check_sequence(text, sequence, options)
        with trace_span("normalize"):
            duration = normalize(assemble(sequence.tokens), source=text)
        return duration, sequence.position

    @traced
    def parse(self, text: str, *, lenient: bool = False) -> ServiceResult:
        """Parse a single duration."""
        op = "parse_duration"
        options = self._settings.parse_options(lenient=lenient)
        try:
            duration, consumed = self._parse_one(text, options)
        except InvalidDurationError as exc:
            logger.debug("Rejected %r: %s", text, exc.reason)
            return ServiceResult(ok=False, op=op, error=self._duration_error(exc))

        warnings: list[str] = []
        if consumed < len(text):
            warnings.append(f"Ignored trailing input {text[consumed:]!r}")
        return ServiceResult.success(
            op,
            {"input": text, "duration": duration.model_dump()},
            warnings=warnings,
        )

    @traced
    def parse_batch(
        self,
        texts: Sequence[str],
        *,
        partial: bool = False,
        lenient: bool = False,
    ) -> ServiceResult:
        """Parse many durations.

        Without *partial*, a single invalid entry fails the whole batch.
        With *partial*, valid entries are returned and invalid ones are
        reported under ``errors``.
        """
        op = "parse_batch"
        options = self._settings.parse_options(lenient=lenient)
        items: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for index, text in enumerate(texts):
            try:
                with trace_span(f"item[{index}]"):
                    duration, _ = self._parse_one(text, options)
            except InvalidDurationError as exc:
                errors.append(
                    {
                        "index": index,
                        "input": text,
                        "error": str(exc),
                        "reason": str(exc.reason),
                    }
                )
                continue
            items.append({"index": index, "input": text, "duration": duration.model_dump()})

        if errors and not partial:
            return ServiceResult.failure(
                op,
                "BATCH_FAILED",
                f"{len(errors)} of {len(texts)} durations are invalid",
                detail={"errors": errors},
            )

        warnings = [f"Skipped invalid duration at index {e['index']}" for e in errors]
        return ServiceResult.success(op, {"items": items, "errors": errors}, warnings=warnings)

    @traced
    def validate(self, text: str) -> ServiceResult:
        """Report whether *text* parses, without failing the operation."""
        options = self._settings.parse_options()
        try:
            self._parse_one(text, options)
        except InvalidDurationError as exc:
            return ServiceResult.success(
                "validate_duration",
                {
                    "input": text,
                    "valid": False,
                    "reason": str(exc.reason),
                    "position": exc.position,
                },
            )
        return ServiceResult.success(
            "validate_duration",
            {"input": text, "valid": True, "reason": None, "position": None},
        )
