"""Unit tests for shared parsing and validation helpers."""

import pytest

from textscrub.errors import EncodingError
from textscrub.parsing import (
    coerce_text,
    normalize_optional_string,
    parse_strategy_name,
    validate_separator,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


def test_coerce_text_passes_strings_through_unchanged() -> None:
    """Valid strings should be returned as the same object."""

    text = "naïve"

    assert coerce_text(text, "transliterate") is text


def test_coerce_text_reports_decode_position() -> None:
    """Decode failures should point at the first invalid byte."""

    with pytest.raises(EncodingError, match=r"\(position 2\)"):
        coerce_text(b"ok\xff", "strip_lines")


@pytest.mark.parametrize("separator", ["-", "_", "", " ", "::", "~"])
def test_validate_separator_accepts_punctuation_and_empty(separator: str) -> None:
    """Punctuation, spaces, and the empty string are valid separators."""

    assert validate_separator(separator) == separator


def test_validate_separator_rejects_non_string_values() -> None:
    """Non-string separators should keep a clear validation message."""

    with pytest.raises(ValueError, match=r"`separator` must be a string\."):
        validate_separator(None)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("unicode", "unicode"),
        ("  Unicode ", "unicode"),
        ("TABLE", "table"),
    ],
)
def test_parse_strategy_name_accepts_mixed_case_tokens(token: str, expected: str) -> None:
    """Strategy parsing should accept valid names case-insensitively."""

    assert parse_strategy_name(token) == expected


@pytest.mark.parametrize("value", ["", "   ", "icu", None, object()])
def test_parse_strategy_name_rejects_invalid_tokens(value: object) -> None:
    """Strategy parsing should reject blank and unknown names."""

    with pytest.raises(ValueError, match="must be one of `unicode`, `table`"):
        parse_strategy_name(value)
