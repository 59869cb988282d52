"""JSONFormatter — structured log lines with request and error fields."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "app.test", logging.ERROR, __file__, 1, "site error: %s", ("boom",), None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "app.test"
    assert log["message"] == "site error: boom"
    assert "timestamp" in log


def test_surfaces_extra_fields_when_present():
    log = json.loads(JSONFormatter().format(_record(
        error_code="DECODE_ERROR", method="POST", path="/sites", site_id=None,
    )))
    assert log["error_code"] == "DECODE_ERROR"
    assert log["method"] == "POST"
    assert log["path"] == "/sites"
    assert "site_id" not in log


def test_setup_logging_does_not_stack_handlers():
    first = setup_logging("DEBUG", "text")
    second = setup_logging("INFO", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
