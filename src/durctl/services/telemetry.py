"""Span timing for service calls, surfaced in ``ServiceResult.meta``.

Off unless ``--verbose`` enables it; a disabled check is one ContextVar
read.  ``@traced`` opens the root span for a service method and
``trace_span`` nests phases (grammar walk, normalization, batch items)
beneath it.  Spans exited by an exception keep the exception's class
name so a rejected input is visible in the tree.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from durctl.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("durctl_telemetry_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("durctl_current_span", default=None)

_log = structlog.get_logger("durctl.telemetry")


@dataclass
class Span:
    """One timed phase; times are ``perf_counter_ns`` readings."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    started_ns: int = field(default_factory=time.perf_counter_ns)
    ended_ns: int | None = None
    error: str | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.ended_ns is None:
            return 0.0
        return (self.ended_ns - self.started_ns) / 1_000_000

    def end(self, error: BaseException | None = None) -> None:
        self.ended_ns = time.perf_counter_ns()
        if error is not None:
            self.error = type(error).__name__

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.error:
            data["error"] = self.error
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _current_span.set(span)
    try:
        yield span
    except BaseException as exc:
        span.end(exc)
        raise
    else:
        span.end()
    finally:
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a phase under the active span; yields None outside a traced call."""
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name, parent=parent)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree as ``meta["telemetry"]``."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        try:
            with _activate(root):
                result = func(*args, **kwargs)
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 3),
                error=root.error,
                children=len(root.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn span collection on for the current context."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)

