"""Tests for meta-tag sanitising and ID validation helpers."""

import pytest
from hypothesis import given, strategies as st

from core.utils.sanitize import sanitize_description, sanitize_for_meta, sanitize_title
from core.utils.validation import is_numeric_id, parse_numeric_id


# =============================================================================
# sanitize
# =============================================================================

@pytest.mark.parametrize("text, expected", [
    (None, ""),
    ("", ""),
    ("<script>alert(1)</script>Hi", "alert(1)Hi"),
    ("Tom &amp; Jerry", "Tom Jerry"),
    ("  spaced\n\tout  ", "spaced out"),
    ("a < b > c", "a c"),
    ("1 < 2", "1 2"),
])
def test_sanitize_for_meta(text, expected):
    assert sanitize_for_meta(text) == expected


def test_truncation_appends_ellipsis():
    assert sanitize_for_meta("abcdefghij", max_length=8) == "abcde..."
    assert sanitize_for_meta("abcdefgh", max_length=8) == "abcdefgh"


def test_title_and_description_limits():
    assert len(sanitize_title("x" * 200)) == 60
    assert len(sanitize_description("x" * 200)) == 160


@given(st.text(), st.integers(min_value=4, max_value=200))
def test_sanitized_text_never_exceeds_limit_or_keeps_brackets(text, limit):
    result = sanitize_for_meta(text, max_length=limit)
    assert len(result) <= limit
    assert "<" not in result and ">" not in result


# =============================================================================
# validation
# =============================================================================

@pytest.mark.parametrize("value, expected", [
    ("12345", True),
    ("0", True),
    ("", False),
    ("abc", False),
    ("12a", False),
    ("-5", False),
    ("1.5", False),
    ("١٢٣", False),
])
def test_is_numeric_id(value, expected):
    assert is_numeric_id(value) is expected


@pytest.mark.parametrize("value, expected", [
    (42, 42),
    ("42", 42),
    (" 7 ", 7),
    (-1, None),
    (True, None),
    ("abc", None),
    (None, None),
    (3.0, None),
    ({"id": 1}, None),
])
def test_parse_numeric_id(value, expected):
    assert parse_numeric_id(value) == expected
