"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from storeadmin.shared.telemetry.logging import LocationLogFilter, setup_logging
from storeadmin.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)
from storeadmin.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    get_trace_id,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "LocationLogFilter",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "get_tracer",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "set_span_error",
    "get_trace_id",
]
