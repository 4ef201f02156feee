"""Process entry point: build the pipeline, run the demo chain, flush."""

from __future__ import annotations

import sys

import structlog
from pydantic import ValidationError

from tracechain.core.config import TracingConfig
from tracechain.core.exceptions import TraceChainError
from tracechain.demo import run_chain
from tracechain.exporters.factory import create_exporter_from_config
from tracechain.tracing import globals as tracing_globals
from tracechain.tracing.provider import build_tracer_provider
from tracechain.utils.logging import configure_logging

logger = structlog.get_logger(__name__)

INSTRUMENTATION_NAME = "tracechain.demo"


def main() -> int:
    """Run the demo and return the process exit status.

    Setup failures (bad configuration, unknown exporter, exporter
    construction) are fatal: they are logged and ``1`` is returned before
    any span is produced.  Export failures during the run are only logged.
    """
    try:
        config = TracingConfig.from_env()
    except (ValidationError, ValueError) as exc:
        configure_logging("INFO", json=False)
        logger.error("startup_failed", error=str(exc))
        return 1

    configure_logging(config.log_level, json=config.log_json, service=config.service_name)

    try:
        exporter = create_exporter_from_config(config)
        provider = build_tracer_provider(exporter, config.service_name, config.batch)
    except TraceChainError as exc:
        logger.error("startup_failed", error=str(exc), code=exc.code, **exc.details)
        return 1

    tracing_globals.install(provider)
    tracer = provider.tracer(INSTRUMENTATION_NAME)

    with provider:
        try:
            run_chain(tracer)
        finally:
            timeout_millis = int(config.flush_timeout_seconds * 1000)
            if provider.force_flush(timeout_millis):
                logger.info("spans_flushed", exporter=config.exporter)
            else:
                logger.warning("span_flush_failed", timeout_millis=timeout_millis)
    return 0


if __name__ == "__main__":
    sys.exit(main())
