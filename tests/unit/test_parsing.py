"""Unit tests for shared argument and configuration parsing helpers."""

import pytest

from extramacros.parsing import (
    normalize_optional_string,
    parse_comment_prefixes,
    parse_permissive_boolean,
    strip_surrounding_quotes,
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


def test_strip_surrounding_quotes_removes_only_one_layer() -> None:
    """Nested quotes keep their inner layer."""

    assert strip_surrounding_quotes('""a.txt""') == '"a.txt"'
    assert strip_surrounding_quotes('"') is None
    assert strip_surrounding_quotes('  "  ') is None
    assert strip_surrounding_quotes(None) is None


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: str, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_comment_prefixes_accepts_strings_and_sequences() -> None:
    """Prefixes are stripped, de-duplicated, and kept in input order."""

    assert parse_comment_prefixes(" #, //, # ") == ("#", "//")
    assert parse_comment_prefixes([";", " -- "]) == (";", "--")
    assert parse_comment_prefixes(" , ") is None
    assert parse_comment_prefixes(None) is None


def test_parse_comment_prefixes_rejects_other_types() -> None:
    """Non-string scalars cannot describe prefixes."""

    with pytest.raises(ValueError, match="string or a list"):
        parse_comment_prefixes(42)
