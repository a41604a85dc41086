"""Shared parsing helpers for macro arguments and configuration values."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def strip_surrounding_quotes(value: str | None) -> str | None:
    """Trim a raw argument and remove one layer of enclosing double quotes.

    Quotes are only removed when present on both ends. The unquoted text is
    trimmed again, so `" "`, `""`, and a lone `"` all normalize to `None`.
    """

    text = normalize_optional_string(value)
    if text is None or text == '"':
        return None
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return normalize_optional_string(text)


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_comment_prefixes(value: object) -> tuple[str, ...] | None:
    """Parse comment prefixes from a comma-separated string or a sequence.

    Returns:
        Tuple of stripped, de-duplicated prefixes in input order, or `None`
        when no non-blank prefix is present.
    """

    if value is None:
        return None
    if isinstance(value, str):
        raw_items: list[object] = list(value.split(","))
    elif isinstance(value, (list, tuple)):
        raw_items = list(value)
    else:
        raise ValueError("Comment prefixes must be a string or a list of strings.")

    prefixes: list[str] = []
    for item in raw_items:
        prefix = normalize_optional_string(item)
        if prefix is not None and prefix not in prefixes:
            prefixes.append(prefix)
    if not prefixes:
        return None
    return tuple(prefixes)
