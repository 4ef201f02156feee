from __future__ import annotations

import logging
import sys
from typing import TextIO, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def _service_stamper(service: str) -> Processor:
    def stamp(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return stamp


def configure_logging(
    level: str = "INFO",
    json: bool = True,
    stream: TextIO | None = None,
    service: str | None = None,
) -> None:
    """Route tracechain's structlog events through one stdlib handler.

    Diagnostics are written to *stream* (``sys.stderr`` by default) and never
    to stdout.  Calling this again replaces the previous handler.

    Args:
        level: Standard logging level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
            Unknown names fall back to ``INFO``.
        json: Render one JSON object per line instead of the coloured console
            format.
        stream: Destination for log lines.
        service: When given, added as a ``service`` field to every record.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if service:
        shared.append(_service_stamper(service))

    renderer: Processor = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )

    # Loggers stay lazy so module-level ``get_logger`` proxies pick up reconfiguration.
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=shared,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a named structlog logger, typically for ``__name__``."""
    return cast(structlog.BoundLogger, structlog.get_logger(name))
