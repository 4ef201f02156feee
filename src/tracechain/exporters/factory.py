"""Select and construct the span exporter named by configuration."""

from __future__ import annotations

import os
import sys
from typing import TextIO

import structlog
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SpanExporter
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from tracechain.core.config import TracingConfig
from tracechain.core.constants import (
    CLOUD_PROJECT_ENV,
    DEFAULT_JAEGER_ENDPOINT,
    EXPORTER_ALIASES,
    ExporterKind,
)
from tracechain.core.exceptions import ExporterInitError, TraceChainError, UnsupportedExporterKind
from tracechain.exporters.discard import DiscardSpanExporter

logger = structlog.get_logger(__name__)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def resolve_kind(kind: str) -> ExporterKind:
    """Map a configured backend name (or alias) to an :class:`ExporterKind`.

    Raises:
        UnsupportedExporterKind: *kind* names no known backend.
    """
    normalized = kind.strip().lower()
    if normalized in EXPORTER_ALIASES:
        return EXPORTER_ALIASES[normalized]
    try:
        return ExporterKind(normalized)
    except ValueError:
        raise UnsupportedExporterKind(kind) from None


def _require_http_url(endpoint: str | None, kind: ExporterKind) -> str:
    if not endpoint:
        raise ExporterInitError(f"{kind} exporter requires an endpoint URL", kind=str(kind))
    try:
        _HTTP_URL.validate_python(endpoint)
    except ValidationError as exc:
        raise ExporterInitError(
            f"{kind} endpoint must be an absolute http(s) URL: {endpoint!r}",
            kind=str(kind),
            details={"endpoint": endpoint},
        ) from exc
    return endpoint


def _jaeger(endpoint: str | None) -> SpanExporter:
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import (  # noqa: PLC0415
        OTLPSpanExporter,
    )

    return OTLPSpanExporter(endpoint=_require_http_url(endpoint, ExporterKind.JAEGER))


def _cloud(project_id: str | None) -> SpanExporter:
    project = project_id if project_id is not None else os.environ.get(CLOUD_PROJECT_ENV, "")
    if not project.strip():
        raise ExporterInitError(
            f"cloud exporter requires a project id (set {CLOUD_PROJECT_ENV})",
            kind=str(ExporterKind.CLOUD),
        )
    from opentelemetry.exporter.cloud_trace import CloudTraceSpanExporter  # noqa: PLC0415

    return CloudTraceSpanExporter(project_id=project.strip())


def create_exporter(
    kind: str,
    *,
    endpoint: str | None = None,
    project_id: str | None = None,
    writer: TextIO | None = None,
) -> SpanExporter:
    """Return a ready-to-use exporter for backend *kind*.

    * ``jaeger`` -- OTLP over HTTP to the Jaeger collector at *endpoint*.
    * ``cloud`` (alias ``gcp``) -- Cloud Trace for *project_id*, read from
      ``GOOGLE_CLOUD_PROJECT`` when not given.  Credentials come from the
      Google application-default chain.
    * ``stdout`` -- pretty-prints spans to *writer* (``sys.stderr``).
    * ``discard`` (alias ``none``) -- drops everything.

    The kind is resolved before anything is constructed, so an unknown kind
    leaves no connection behind.

    Raises:
        UnsupportedExporterKind: *kind* is not recognised.
        ExporterInitError: the backend could not be set up; the original
            failure is chained.
    """
    resolved = resolve_kind(kind)

    try:
        if resolved is ExporterKind.JAEGER:
            exporter = _jaeger(endpoint)
        elif resolved is ExporterKind.CLOUD:
            exporter = _cloud(project_id)
        elif resolved is ExporterKind.STDOUT:
            exporter = ConsoleSpanExporter(out=writer if writer is not None else sys.stderr)
        else:
            exporter = DiscardSpanExporter()
    except TraceChainError:
        raise
    except Exception as exc:
        raise ExporterInitError(
            f"failed to initialise {resolved} exporter: {exc}", kind=str(resolved)
        ) from exc

    logger.info("exporter_created", kind=str(resolved), exporter=type(exporter).__name__)
    return exporter


def create_exporter_from_config(config: TracingConfig) -> SpanExporter:
    """Build the exporter described by *config*."""
    return create_exporter(
        config.exporter,
        endpoint=config.jaeger_endpoint or DEFAULT_JAEGER_ENDPOINT,
        project_id=config.cloud_project_id,
    )
