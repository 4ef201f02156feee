"""tracechain -- a minimal distributed-tracing pipeline with pluggable exporters."""

from tracechain.__version__ import __version__
from tracechain.core.config import BatchConfig, TracingConfig
from tracechain.core.constants import ExporterKind
from tracechain.core.exceptions import (
    ConfigError,
    ExporterInitError,
    TraceChainError,
    UnsupportedExporterKind,
)
from tracechain.exporters import DiscardSpanExporter, create_exporter
from tracechain.tracing import (
    Tracer,
    TracerProvider,
    build_tracer_provider,
    root_context,
)
from tracechain.tracing.globals import get_tracer, get_tracer_provider, install

__all__ = [
    "BatchConfig",
    "ConfigError",
    "DiscardSpanExporter",
    "ExporterInitError",
    "ExporterKind",
    "TraceChainError",
    "Tracer",
    "TracerProvider",
    "TracingConfig",
    "UnsupportedExporterKind",
    "__version__",
    "build_tracer_provider",
    "create_exporter",
    "get_tracer",
    "get_tracer_provider",
    "install",
    "root_context",
]
