"""Process-wide tracer provider and propagator installation.

Explicitly passing a :class:`TracerProvider` around is preferred; the
OpenTelemetry globals exist for instrumentation that cannot be reached that
way.

Installation is one-shot and not re-entrant: the first :func:`install` wins
and later attempts are logged and ignored.  Until then
:func:`get_tracer_provider` returns OpenTelemetry's proxy provider, whose
spans are non-recording and go nowhere.
"""

from __future__ import annotations

import threading

import structlog
from opentelemetry import propagate, trace
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME

from tracechain.tracing.propagation import default_propagator
from tracechain.tracing.provider import TracerProvider
from tracechain.tracing.tracer import Tracer

logger = structlog.get_logger(__name__)

_lock = threading.Lock()


def install(provider: TracerProvider) -> bool:
    """Install *provider* and the trace-context + baggage propagator.

    Returns ``True`` if it was installed, ``False`` if another provider was
    already installed (the call is then a logged no-op and the propagator is
    left alone).
    """
    service = provider.resource.attributes.get(SERVICE_NAME)
    with _lock:
        trace.set_tracer_provider(provider)
        installed = trace.get_tracer_provider() is provider
        if installed:
            propagate.set_global_textmap(default_propagator())
    if not installed:
        logger.warning("tracer_provider_override_ignored", service=service)
        return False
    logger.info("tracer_provider_installed", service=service)
    return True


def get_tracer_provider() -> trace.TracerProvider:
    return trace.get_tracer_provider()


def get_tracer(name: str, version: str | None = None) -> Tracer:
    """Explicit-context tracer from the installed provider."""
    return Tracer(trace.get_tracer(name, version))


def get_propagator() -> TextMapPropagator:
    return propagate.get_global_textmap()
