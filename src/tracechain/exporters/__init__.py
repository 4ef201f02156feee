from tracechain.exporters.discard import DiscardSpanExporter
from tracechain.exporters.factory import create_exporter, create_exporter_from_config, resolve_kind

__all__ = [
    "DiscardSpanExporter",
    "create_exporter",
    "create_exporter_from_config",
    "resolve_kind",
]
