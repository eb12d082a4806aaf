"""Unit tests for description markdown cleanup."""

from jobboard.utils.markdown import normalize_markdown


def test_empty_values():
    assert normalize_markdown(None) == ""
    assert normalize_markdown("") == ""


def test_line_endings_and_blank_lines():
    text = "We build things.\r\n\r\n\r\n\r\nJoin us.\r"
    assert normalize_markdown(text) == "We build things.\n\nJoin us."


def test_bullets_become_list_items():
    text = "Stack:\n• Python\n  ● PostgreSQL"
    assert normalize_markdown(text) == "Stack:\n- Python\n- PostgreSQL"


def test_trailing_whitespace_and_nbsp():
    text = "Line one   \nLine\u00a0two\t\n"
    assert normalize_markdown(text) == "Line one\nLine two"


def test_existing_markdown_untouched():
    text = "## Role\n\n- Ship features\n- Review code\n\n**Remote** friendly"
    assert normalize_markdown(text) == text
