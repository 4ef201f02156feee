"""TracerProvider -- binds a sampler, a resource and the span processors."""

from __future__ import annotations

import threading
from types import TracebackType

import structlog
from opentelemetry.sdk import trace as sdktrace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON, Sampler

from tracechain.core.config import BatchConfig
from tracechain.core.constants import SCHEMA_URL
from tracechain.tracing.processor import DeadlineMultiSpanProcessor
from tracechain.tracing.tracer import Tracer

logger = structlog.get_logger(__name__)


def service_resource(service_name: str) -> Resource:
    """Resource naming *service_name*, tagged with the semantic-convention schema."""
    return Resource.create({SERVICE_NAME: service_name}, schema_url=SCHEMA_URL)


class TracerProvider(sdktrace.TracerProvider):
    """OpenTelemetry SDK provider that owns its export pipeline.

    Use it as a context manager to guarantee the pipeline is flushed and shut
    down on both normal and error exits::

        with build_tracer_provider(exporter, "checkout") as provider:
            run(provider.tracer(__name__))

    Args:
        resource: Metadata attached to every span; defaults to the SDK's
            default resource.
        sampler: Sampling policy; defaults to ``ALWAYS_ON``.
        processors: Initial processor chain, invoked in order.
    """

    def __init__(
        self,
        resource: Resource | None = None,
        sampler: Sampler | None = None,
        processors: tuple[sdktrace.SpanProcessor, ...] | list[sdktrace.SpanProcessor] = (),
    ) -> None:
        super().__init__(
            sampler=sampler if sampler is not None else ALWAYS_ON,
            resource=resource,
            shutdown_on_exit=False,
            active_span_processor=DeadlineMultiSpanProcessor(),
        )
        self._closed = False
        self._close_lock = threading.Lock()
        for processor in processors:
            self.add_span_processor(processor)

    @property
    def is_shutdown(self) -> bool:
        return self._closed

    def tracer(self, name: str, version: str | None = None) -> Tracer:
        """Return an explicit-context :class:`Tracer` whose spans carry *name* as scope."""
        if not name:
            logger.warning("invalid_tracer_name", name=name)
        return Tracer(self.get_tracer(name, version))

    def shutdown(self) -> None:
        """Flush and shut down every processor.  Only the first call has effect."""
        with self._close_lock:
            if self._closed:
                logger.warning("tracer_provider_already_shutdown")
                return
            self._closed = True
        super().shutdown()

    def __enter__(self) -> TracerProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self.force_flush():
                logger.warning("tracer_provider_flush_incomplete")
        finally:
            self.shutdown()


def build_tracer_provider(
    exporter: SpanExporter,
    service_name: str,
    batch: BatchConfig | None = None,
) -> TracerProvider:
    """Assemble the standard pipeline around *exporter*.

    Spans are batched (never exported on the ending thread), every span is
    sampled, and each one carries a resource naming *service_name*.
    """
    batch = batch or BatchConfig()
    processor = BatchSpanProcessor(
        exporter,
        max_queue_size=batch.max_queue_size,
        schedule_delay_millis=batch.schedule_delay_millis,
        max_export_batch_size=batch.max_export_batch_size,
        export_timeout_millis=batch.export_timeout_millis,
    )
    return TracerProvider(
        resource=service_resource(service_name),
        sampler=ALWAYS_ON,
        processors=[processor],
    )
