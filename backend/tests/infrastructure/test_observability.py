"""Structured Logging - JSON formatter surfaces the filter-related extras."""

import json
import logging

import pytest

from inputguard.infrastructure.observability import (
    JSONFormatter,
    build_formatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "inputguard.test", logging.WARNING, __file__, 1, "bad call", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "inputguard.test"
    assert out["message"] == "bad call"
    assert "timestamp" in out


def test_json_formatter_includes_extras_when_present():
    out = json.loads(JSONFormatter().format(
        _record(error_code="VALIDATION_ERROR", argument="input", feature=None),
    ))
    assert out["error_code"] == "VALIDATION_ERROR"
    assert out["argument"] == "input"
    assert "feature" not in out


def test_build_formatter_text():
    formatter = build_formatter("text")
    assert not isinstance(formatter, JSONFormatter)
    assert "bad call" in formatter.format(_record())


def test_setup_logging_is_idempotent(restore_root):
    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")
    ours = [h for h in restore_root.handlers if h.get_name() == handler.get_name()]
    assert ours == [handler]
    assert restore_root.level == logging.WARNING
