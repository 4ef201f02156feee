"""W3C trace-context and baggage propagation over explicit contexts."""

from __future__ import annotations

from collections.abc import MutableMapping

from opentelemetry import propagate
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.context import Context
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator


def default_propagator() -> CompositePropagator:
    """``traceparent``/``tracestate`` plus ``baggage``, in that order."""
    return CompositePropagator([TraceContextTextMapPropagator(), W3CBaggagePropagator()])


def inject(carrier: MutableMapping[str, str], context: Context) -> None:
    """Write the span and baggage of *context* into *carrier* with the global propagator."""
    propagate.inject(carrier, context=context)


def extract(carrier: MutableMapping[str, str], context: Context | None = None) -> Context:
    """Return *context* (an empty one by default) extended with what *carrier* holds.

    Malformed headers are ignored and leave the context unchanged.
    """
    return propagate.extract(carrier, context=context if context is not None else Context())
