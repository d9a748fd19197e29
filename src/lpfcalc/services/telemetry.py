"""Telemetry for service calls: timed spans, ``@traced`` and ``trace_span``.

Off by default, so a decorated call costs one ContextVar read. ``-v``
turns it on; each top-level service call then collects a span tree
(designer step, analysis step) and returns it as
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from lpfcalc.services.result import ServiceResult

log = structlog.get_logger("lpfcalc.telemetry")

_enabled: ContextVar[bool] = ContextVar("lpfcalc_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("lpfcalc_active_span", default=None)


@dataclass
class Span:
    """One timed step of a service call."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        """Elapsed milliseconds, 0.0 while the span is still open."""
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000.0

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Serializable tree; empty annotations and children are omitted."""
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step under the active span.

    Yields None when telemetry is off or no ``@traced`` call is active,
    so callers guard annotations with ``if span is not None``.
    """
    parent = get_current_span()
    if parent is None:
        yield None
        return

    span = Span(name=name)
    parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Open a root span around a service method.

    A returned ServiceResult gets a copy with the span tree merged into
    its ``meta``; other return values pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        token = _active.set(root)
        try:
            outcome = func(*args, **kwargs)
        finally:
            root.end()
            _active.reset(token)

        if not isinstance(outcome, ServiceResult):
            return outcome

        log.debug(
            "span.complete",
            span_name=root.name,
            op=outcome.op,
            ok=outcome.ok,
            duration_ms=round(root.duration_ms, 3),
        )
        meta = dict(outcome.meta or {})
        meta["telemetry"] = root.to_dict()
        return outcome.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Start collecting spans in the current context (``-v``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost open span, or None when telemetry is off."""
    if not _enabled.get():
        return None
    return _active.get()
