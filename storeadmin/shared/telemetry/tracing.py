"""Tracing helpers: the ``traced`` decorator and current-span utilities.

Spans only record identifiers (form, field, relation and scope names, record
and location ids). Field values and configured SQL are never attached.
"""

import asyncio
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

AttributeValue = str | int | float | bool

# Keyword arguments recorded as "arg.<name>" span attributes.
_RECORDED_ARGS = frozenset({
    "attribute", "relation_from", "form", "field", "record_id", "location_id", "scope",
})


@contextmanager
def _span_outcome(span: trace.Span) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    span.set_status(Status(StatusCode.OK))


def _recorded_args(kwargs: dict[str, Any]) -> dict[str, str]:
    return {
        f"arg.{key}": str(value)
        for key, value in kwargs.items()
        if key in _RECORDED_ARGS and value is not None
    }


def traced(
    operation_name: str | None = None,
    attributes: dict[str, AttributeValue] | None = None,
) -> Callable:
    """Run the decorated function (sync or async) in its own span.

    The span is named operation_name (default module.funcname), carries
    `attributes` plus the recorded keyword arguments, and ends with ERROR
    status when the function raises.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        def start(kwargs: dict[str, Any]):
            return tracer.start_as_current_span(
                span_name, attributes={**(attributes or {}), **_recorded_args(kwargs)}
            )

        if asyncio.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with start(kwargs) as span, _span_outcome(span):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with start(kwargs) as span, _span_outcome(span):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def _recording_span() -> trace.Span | None:
    span = trace.get_current_span()
    return span if span.is_recording() else None


def add_span_attributes(**attributes: AttributeValue | None) -> None:
    """Add attributes to the current span; None values are skipped."""
    span = _recording_span()
    if span is None:
        return
    for key, value in attributes.items():
        if value is not None:
            span.set_attribute(key, value)


def add_span_event(name: str, attributes: dict[str, AttributeValue] | None = None) -> None:
    """Add an event to the current span."""
    span = _recording_span()
    if span is not None:
        span.add_event(name, attributes=attributes or {})


def set_span_error(exception: Exception) -> None:
    """Mark the current span as error and record the exception."""
    span = _recording_span()
    if span is not None:
        span.set_status(Status(StatusCode.ERROR, str(exception)))
        span.record_exception(exception)


def get_trace_id() -> str | None:
    """Return the current trace ID as 32-char hex, or None outside a span."""
    ctx = trace.get_current_span().get_span_context()
    return format(ctx.trace_id, "032x") if ctx.is_valid else None
