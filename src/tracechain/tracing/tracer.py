"""Tracer -- starts spans linked to the span carried by an explicit context."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Span, Status, StatusCode


class Tracer:
    """Starts spans from a caller-supplied :class:`Context`.

    Usage::

        tracer = provider.tracer("checkout")
        with tracer.span(root_context(), "handle_request") as (ctx, root):
            with tracer.span(ctx, "load_cart") as (ctx, child):
                child.set_attribute("cart.items", 3)

    Wraps an OpenTelemetry tracer but never touches the implicit current
    context, so call chains on different threads cannot see each other's
    spans.  Safe to share between threads.
    """

    def __init__(self, tracer: trace.Tracer) -> None:
        self._tracer = tracer

    @property
    def otel_tracer(self) -> trace.Tracer:
        return self._tracer

    def start(
        self,
        context: Context | None,
        name: str,
        *,
        attributes: dict[str, Any] | None = None,
        start_time: int | None = None,
    ) -> tuple[Context, Span]:
        """Start a span as a child of the span carried by *context*.

        Parameters
        ----------
        context:
            The caller's context.  When it carries a valid span the new span
            joins that trace with it as parent; otherwise (including
            ``None``) the new span is the root of a fresh trace.
        name:
            Human-readable operation name (e.g. ``"db.query"``).
        attributes:
            Initial span attributes.
        start_time:
            Explicit start timestamp in nanoseconds since the epoch.

        Returns
        -------
        The derived context carrying the new span (pass it to callees) and
        the span itself.  The caller must ``end()`` the span on every exit
        path; :meth:`span` does that automatically.
        """
        parent = context if context is not None else Context()
        span = self._tracer.start_span(
            name, context=parent, attributes=attributes, start_time=start_time
        )
        return trace.set_span_in_context(span, parent), span

    @contextmanager
    def span(
        self,
        context: Context | None,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Iterator[tuple[Context, Span]]:
        """Start a span that ends when the ``with`` block exits, however it exits.

        An exception escaping the block is recorded on the span, the status
        is set to ``ERROR``, and the exception propagates.  The end time is
        measured on the monotonic clock from the start, so it never precedes
        the start time.
        """
        start_time = time.time_ns()
        anchor = time.monotonic_ns()
        child_context, span = self.start(
            context, name, attributes=attributes, start_time=start_time
        )
        try:
            yield child_context, span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, f"{type(exc).__name__}: {exc}"))
            raise
        finally:
            span.end(end_time=start_time + (time.monotonic_ns() - anchor))
