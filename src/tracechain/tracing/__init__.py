from tracechain.tracing.context import (
    baggage_of,
    parent_of,
    root_context,
    with_baggage,
    without_baggage,
)
from tracechain.tracing.processor import DeadlineMultiSpanProcessor
from tracechain.tracing.propagation import default_propagator, extract, inject
from tracechain.tracing.provider import TracerProvider, build_tracer_provider, service_resource
from tracechain.tracing.tracer import Tracer

__all__ = [
    "DeadlineMultiSpanProcessor",
    "Tracer",
    "TracerProvider",
    "baggage_of",
    "build_tracer_provider",
    "default_propagator",
    "extract",
    "inject",
    "parent_of",
    "root_context",
    "service_resource",
    "with_baggage",
    "without_baggage",
]
