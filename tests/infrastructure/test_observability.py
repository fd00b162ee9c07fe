"""Structured logging tests — JSON formatter fields and setup."""

import json
import logging

from sales_ledger.infrastructure import observability
from sales_ledger.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "sales_ledger.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "sales_ledger.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(tool_name="get_top_customers", row_count=3, secret="x"),
    ))
    assert log["tool_name"] == "get_top_customers"
    assert log["row_count"] == 3
    assert "secret" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "text")
    first = observability._handler
    setup_logging("WARNING", "json")
    assert first not in logging.root.handlers
    assert observability._handler in logging.root.handlers
    assert isinstance(observability._handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
