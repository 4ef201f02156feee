"""Reference call chain: A calls B calls C, each inside its own span.

Every operation takes the caller's :class:`Context`, starts its span from it
and hands the derived context to the next operation, so the three spans form
one trace with A as root, B as A's child and C as B's child.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from opentelemetry.context import Context

from tracechain.tracing.context import root_context
from tracechain.tracing.tracer import Tracer

DEFAULT_PAUSES: tuple[float, float, float] = (0.1, 0.2, 0.3)


def operation_a(tracer: Tracer, context: Context, pauses: Sequence[float] = DEFAULT_PAUSES) -> None:
    with tracer.span(context, "a") as (ctx, span):
        span.set_attribute("demo.pause_seconds", pauses[0])
        time.sleep(pauses[0])
        operation_b(tracer, ctx, pauses)


def operation_b(tracer: Tracer, context: Context, pauses: Sequence[float] = DEFAULT_PAUSES) -> None:
    with tracer.span(context, "b") as (ctx, span):
        span.set_attribute("demo.pause_seconds", pauses[1])
        time.sleep(pauses[1])
        operation_c(tracer, ctx, pauses)


def operation_c(tracer: Tracer, context: Context, pauses: Sequence[float] = DEFAULT_PAUSES) -> None:
    with tracer.span(context, "c") as (_, span):
        span.set_attribute("demo.pause_seconds", pauses[2])
        time.sleep(pauses[2])


def run_chain(
    tracer: Tracer,
    context: Context | None = None,
    pauses: Sequence[float] = DEFAULT_PAUSES,
) -> None:
    """Run A → B → C starting from *context* (a fresh root context by default)."""
    if len(pauses) != len(DEFAULT_PAUSES):
        raise ValueError("run_chain needs exactly three pauses")
    operation_a(tracer, context if context is not None else root_context(), pauses)
