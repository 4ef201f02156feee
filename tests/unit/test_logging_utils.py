"""Tests for utils/logging.py — configure_logging and get_logger."""
from __future__ import annotations

import io
import json
import logging

from tracechain.utils.logging import configure_logging, get_logger


def test_configure_logging_sets_root_level_debug() -> None:
    configure_logging("DEBUG", json=False)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_sets_root_level_warning() -> None:
    configure_logging("WARNING", json=True)
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_installs_single_handler() -> None:
    configure_logging("INFO", json=True)
    configure_logging("INFO", json=True)
    assert len(logging.getLogger().handlers) == 1


def test_configure_logging_invalid_level_falls_back_to_info() -> None:
    configure_logging("NOTAREAL_LEVEL", json=False)
    assert logging.getLogger().level == logging.INFO


def test_json_output_goes_to_given_stream() -> None:
    stream = io.StringIO()
    configure_logging("INFO", json=True, stream=stream)
    get_logger("tests.logging").info("span_exported", batch_size=3)

    line = stream.getvalue().strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "span_exported"
    assert record["batch_size"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filters_lower_records() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", json=True, stream=stream)
    get_logger("tests.logging").info("hidden")
    assert stream.getvalue() == ""


def test_get_logger_has_log_methods() -> None:
    logger = get_logger("tests.logging")
    for method in ("debug", "info", "warning", "error"):
        assert hasattr(logger, method)


def test_service_field_stamped_on_every_record() -> None:
    stream = io.StringIO()
    configure_logging("INFO", json=True, stream=stream, service="checkout")
    get_logger("tests.logging").info("first")
    get_logger("tests.logging").info("second", service="override")

    first, second = (json.loads(line) for line in stream.getvalue().splitlines())
    assert first["service"] == "checkout"
    assert second["service"] == "override"


def test_no_service_field_by_default() -> None:
    stream = io.StringIO()
    configure_logging("INFO", json=True, stream=stream)
    get_logger("tests.logging").info("plain")
    assert "service" not in json.loads(stream.getvalue())


def test_stdlib_records_share_the_format() -> None:
    stream = io.StringIO()
    configure_logging("INFO", json=True, stream=stream, service="checkout")
    logging.getLogger("tests.stdlib").warning("from stdlib")
    record = json.loads(stream.getvalue())
    assert record["event"] == "from stdlib"
    assert record["level"] == "warning"
    assert record["service"] == "checkout"
