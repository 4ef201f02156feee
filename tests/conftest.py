"""Shared test fixtures."""
from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from opentelemetry import propagate, trace
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.util._once import Once

from tracechain.core.config import BatchConfig
from tracechain.tracing.propagation import default_propagator
from tracechain.tracing.provider import TracerProvider, build_tracer_provider, service_resource


def _reset_otel_globals() -> None:
    # OpenTelemetry only lets the global provider be set once per process.
    trace._TRACER_PROVIDER_SET_ONCE = Once()
    trace._TRACER_PROVIDER = None
    propagate.set_global_textmap(default_propagator())


@pytest.fixture(autouse=True)
def _reset_globals() -> Iterator[None]:
    _reset_otel_globals()
    yield
    _reset_otel_globals()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def memory_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def simple_provider(memory_exporter: InMemorySpanExporter) -> Iterator[TracerProvider]:
    """Provider exporting synchronously into ``memory_exporter``."""
    provider = TracerProvider(
        resource=service_resource("test-service"),
        processors=[SimpleSpanProcessor(memory_exporter)],
    )
    yield provider
    if not provider.is_shutdown:
        provider.shutdown()


@pytest.fixture
def fast_batch() -> BatchConfig:
    return BatchConfig(
        max_queue_size=64,
        schedule_delay_millis=50,
        max_export_batch_size=8,
        export_timeout_millis=2000,
    )


@pytest.fixture
def batch_provider(
    memory_exporter: InMemorySpanExporter, fast_batch: BatchConfig
) -> Iterator[TracerProvider]:
    """Provider batching into ``memory_exporter`` with short delays."""
    provider = build_tracer_provider(memory_exporter, "test-service", fast_batch)
    yield provider
    if not provider.is_shutdown:
        provider.shutdown()
