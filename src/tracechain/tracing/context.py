"""Helpers for the explicit, immutable per-call-chain :class:`Context`.

A context is passed explicitly to every operation that may start a child
span.  Nothing here reads or attaches the implicit "current" context:
starting a span, or adding baggage, returns a new context and leaves the one
it was given untouched.
"""

from __future__ import annotations

from collections.abc import Mapping

from opentelemetry import baggage, trace
from opentelemetry.context import Context
from opentelemetry.trace import SpanContext


def root_context() -> Context:
    """Return an empty context; spans started from it begin a new trace."""
    return Context()


def with_baggage(context: Context, key: str, value: str) -> Context:
    return baggage.set_baggage(key, value, context=context)


def without_baggage(context: Context, key: str) -> Context:
    return baggage.remove_baggage(key, context=context)


def baggage_of(context: Context) -> Mapping[str, object]:
    return baggage.get_all(context=context)


def parent_of(context: Context) -> SpanContext | None:
    """The span context new spans started from *context* attach to, if any."""
    span_context = trace.get_current_span(context).get_span_context()
    return span_context if span_context.is_valid else None
