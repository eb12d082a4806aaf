"""Tests for logging configuration and formatters."""

import json
import logging
import sys
from pathlib import Path

import pytest

from jobboard.logging import ComponentLoggerAdapter, get_logger
from jobboard.logging.config import (
    SERVICE_NAME,
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from jobboard.logging.context import clear_log_context, log_context


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def logger():
    """Create a test logger with no handlers."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()

    yield test_logger

    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _record(logger, message="Test message", extra=None):
    return logger.makeRecord("test", logging.INFO, "test.py", 1, message, (), None, extra=extra)


def test_json_formatter_basic(logger):
    """Test JSONFormatter produces valid JSON with mandatory fields."""
    log_obj = json.loads(JSONFormatter().format(_record(logger)))

    assert log_obj["level"] == "INFO"
    assert log_obj["message"] == "Test message"
    assert log_obj["logger"] == "test"
    assert "timestamp" in log_obj


def test_json_formatter_with_extra_fields(logger):
    """Test JSONFormatter includes extra fields."""
    record = _record(logger, extra={"event": "store.fetch.completed", "count": 42, "flag": True})

    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["event"] == "store.fetch.completed"
    assert log_obj["count"] == 42
    assert log_obj["flag"] is True


def test_json_formatter_stringifies_unknown_types(logger):
    """Test that values json cannot encode are rendered with str()."""
    record = _record(logger, extra={"path": Path("feed.xml")})

    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["path"] == "feed.xml"


def test_json_formatter_includes_exception(logger):
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logger.makeRecord("test", logging.ERROR, "test.py", 1, "failed", (), sys.exc_info())

    log_obj = json.loads(JSONFormatter().format(record))

    assert "RuntimeError: boom" in log_obj["exc_info"]


def test_contextual_filter_adds_static_fields(logger):
    """Test ContextualFilter adds static service and environment fields."""
    record = _record(logger)

    ContextualFilter(service="test-service", environment="test").filter(record)

    assert record.service == "test-service"
    assert record.environment == "test"


def test_contextual_filter_defaults():
    assert ContextualFilter().service == SERVICE_NAME == "job-board"


def test_contextual_filter_adds_context_fields(logger):
    """Test ContextualFilter adds fields from log context."""
    with log_context(request_id="abc123", command="feed"):
        record = _record(logger)
        ContextualFilter().filter(record)

    assert record.request_id == "abc123"
    assert record.command == "feed"


def test_contextual_filter_explicit_extra_wins(logger):
    """Test that a field passed via extra is not replaced by context."""
    with log_context(job_id="from-context"):
        record = _record(logger, extra={"job_id": "from-extra"})
        ContextualFilter().filter(record)

    assert record.job_id == "from-extra"


def test_json_formatter_with_context(logger):
    """Test full pipeline: context + filter + JSON formatter."""
    with log_context(request_id="abc123", feed_format="rss"):
        record = _record(logger, "Built feed", extra={"event": "feed.build.completed"})
        ContextualFilter(environment="test").filter(record)
        log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["message"] == "Built feed"
    assert log_obj["event"] == "feed.build.completed"
    assert log_obj["service"] == "job-board"
    assert log_obj["environment"] == "test"
    assert log_obj["request_id"] == "abc123"
    assert log_obj["feed_format"] == "rss"


def test_key_value_formatter_with_extras(logger):
    """Test KeyValueFormatter appends sorted key=value pairs."""
    formatter = KeyValueFormatter("[%(levelname)s] %(name)s: %(message)s")
    record = _record(
        logger,
        extra={"event": "repository.jobs.loaded", "count": 5, "note": "two words", "flag": False},
    )

    output = formatter.format(record)

    assert output == (
        '[INFO] test: Test message count=5 event=repository.jobs.loaded flag=false note="two words"'
    )


def test_key_value_formatter_skips_service_fields(logger):
    formatter = KeyValueFormatter("%(message)s")
    record = _record(logger)
    ContextualFilter(environment="test").filter(record)

    assert formatter.format(record) == "Test message"


def test_configure_logging_invalid_level():
    """Test configure_logging rejects invalid log level."""
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging(level="INVALID")


def test_configure_logging_invalid_format():
    """Test configure_logging rejects invalid format type."""
    with pytest.raises(ValueError, match="Invalid log format"):
        configure_logging(format_type="invalid")


@pytest.mark.parametrize(
    "format_type,formatter_cls",
    [("json", JSONFormatter), ("key-value", KeyValueFormatter)],
)
def test_configure_logging_installs_one_handler(restore_root_logger, format_type, formatter_cls):
    """Test configure_logging replaces root handlers with one stdout handler."""
    configure_logging(level="warning", format_type=format_type, environment="test")

    assert len(restore_root_logger.handlers) == 1
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler.formatter, formatter_cls)
    assert restore_root_logger.level == logging.WARNING
    assert any(isinstance(f, ContextualFilter) for f in handler.filters)


def test_timestamp_format_in_json(logger):
    """Test that JSON formatter produces an ISO-8601 UTC timestamp."""
    timestamp = json.loads(JSONFormatter().format(_record(logger)))["timestamp"]

    assert timestamp.endswith("Z")
    assert "T" in timestamp
    assert len(timestamp) == 24  # 2025-11-04T10:30:00.123Z


def test_get_logger_with_component():
    """Test that get_logger tags records with a component."""
    adapter = get_logger("jobboard.test", component="store")

    assert isinstance(adapter, ComponentLoggerAdapter)
    msg, kwargs = adapter.process("hello", {"extra": {"event": "store.fetch.completed"}})
    assert kwargs["extra"] == {"component": "store", "event": "store.fetch.completed"}


def test_get_logger_without_component():
    assert isinstance(get_logger("jobboard.test"), logging.Logger)
