"""Structured Logging — tests for JSONFormatter and setup_logging.

Tests cover:
    - JSON output carries base fields and known extras
    - Unknown extras are not emitted
    - setup_logging replaces its own handler on repeated calls
"""

import json
import logging

from dvdshop.infrastructure import observability
from dvdshop.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("dvdshop.test", logging.INFO, __file__, 1, "Cart priced", (), None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "dvdshop.test"
    assert payload["message"] == "Cart priced"
    assert "timestamp" in payload


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(items_count=3, discount_applied="20%", total_price=56, secret="x"),
    ))
    assert payload["items_count"] == 3
    assert payload["discount_applied"] == "20%"
    assert payload["total_price"] == 56
    assert "secret" not in payload


def test_setup_logging_is_repeatable():
    if observability._handler is not None:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
    before = len(logging.root.handlers)
    level_before = logging.root.level
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
        logging.root.setLevel(level_before)
