"""Tests for logging context propagation."""

import re

import pytest

from jobboard.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    new_request_id,
    pop_log_context,
    push_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


def test_empty_context():
    """Test that context starts empty."""
    assert get_log_context() == {}


def test_push_and_pop():
    """Test pushing fields and restoring with the token."""
    token = push_log_context(request_id="abc123", command="list")
    assert get_log_context() == {"request_id": "abc123", "command": "list"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_restores_layers():
    """Test nested pushes pop back one layer at a time."""
    token1 = push_log_context(request_id="abc123")
    token2 = push_log_context(job_id="recBackend0001")
    assert get_log_context() == {"request_id": "abc123", "job_id": "recBackend0001"}

    pop_log_context(token2)
    assert get_log_context() == {"request_id": "abc123"}

    pop_log_context(token1)
    assert get_log_context() == {}


def test_context_override():
    """Test that pushing the same key overwrites the previous value."""
    token1 = push_log_context(feed_format="rss")
    token2 = push_log_context(feed_format="atom")
    assert get_log_context() == {"feed_format": "atom"}

    pop_log_context(token2)
    assert get_log_context() == {"feed_format": "rss"}
    pop_log_context(token1)


def test_context_manager_nested():
    """Test nested context managers."""
    with log_context(request_id="abc123"):
        with log_context(command="feed", feed_format="json"):
            assert get_log_context() == {
                "request_id": "abc123",
                "command": "feed",
                "feed_format": "json",
            }

        assert get_log_context() == {"request_id": "abc123"}

    assert get_log_context() == {}


def test_context_manager_exception():
    """Test that context is restored even when an exception occurs."""
    with pytest.raises(ValueError):
        with log_context(request_id="abc123"):
            raise ValueError("Test exception")

    assert get_log_context() == {}


def test_clear_context():
    push_log_context(request_id="abc123", command="check")
    clear_log_context()
    assert get_log_context() == {}


def test_context_isolation():
    """Test that get_log_context returns a copy, not the actual dict."""
    with log_context(request_id="abc123"):
        context = get_log_context()
        context["job_id"] = "modified"

        assert get_log_context() == {"request_id": "abc123"}


def test_new_request_id():
    """Test request ids are short, hex and unique."""
    first = new_request_id()
    second = new_request_id()

    assert re.fullmatch(r"[0-9a-f]{12}", first)
    assert first != second
