"""Tracing helpers and telemetry configuration."""

import logging

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from storeadmin.core.location_context import set_location_id
from storeadmin.shared.telemetry.logging import LocationLogFilter
from storeadmin.shared.telemetry.telemetry import TelemetryConfig
from storeadmin.shared.telemetry.tracing import add_span_attributes, get_trace_id, traced


async def test_traced_async_returns_result() -> None:
    @traced("test.async")
    async def add(a: int, b: int) -> int:
        return a + b

    assert await add(2, 3) == 5


def test_traced_sync_reraises() -> None:
    @traced()
    def fail() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError):
        fail()


def test_disabled_telemetry_sets_no_provider() -> None:
    telemetry = TelemetryConfig("storeadmin", "1.0.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    assert telemetry.tracer_provider is None


def test_no_trace_id_outside_span() -> None:
    assert get_trace_id() is None


def test_span_attributes_skip_none() -> None:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    with provider.get_tracer(__name__).start_as_current_span("relation.resolve"):
        add_span_attributes(**{"relation.name": "customer", "relation.scope": None})
        assert get_trace_id() is not None
    (span,) = exporter.get_finished_spans()
    assert dict(span.attributes) == {"relation.name": "customer"}


def _log_record() -> logging.LogRecord:
    return logging.LogRecord("storeadmin", logging.INFO, __file__, 1, "resolved", None, None)


def test_log_records_carry_location() -> None:
    record = _log_record()
    set_location_id(4)
    assert LocationLogFilter().filter(record) is True
    assert record.location_id == 4


def test_log_records_without_location() -> None:
    record = _log_record()
    LocationLogFilter().filter(record)
    assert record.location_id == "-"
