"""Single-line text normalization stage.

Responsibilities:
- Turn file lines into one whitespace-normalized line.
- Distinguish "no usable content" (`None`) from an empty string.
"""

from __future__ import annotations

import re
from typing import Iterable

from .cleaners import (
    DEFAULT_COMMENT_PREFIXES,
    CollapseWhitespace,
    DropCommentLines,
    LineRule,
    StripLines,
)


_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class TextNormalizer:
    """Normalize raw lines into canonical single-line macro output."""

    def __init__(self, comment_prefixes: Iterable[str] = DEFAULT_COMMENT_PREFIXES) -> None:
        """Initialize line rules for the given comment prefixes."""

        self.line_rules: list[LineRule] = [DropCommentLines(comment_prefixes), StripLines()]
        self.collapse = CollapseWhitespace()

    def normalize_lines(self, lines: Iterable[str]) -> str | None:
        """Normalize lines and return `None` when nothing usable remains."""

        kept = list(lines)
        for rule in self.line_rules:
            kept = rule.apply(kept)

        normalized = self.collapse.apply(" ".join(kept))
        if not normalized:
            return None
        return normalized

    def normalize(self, text: str) -> str | None:
        """Normalize multi-line text split only on `\\n`, `\\r`, and `\\r\\n`."""

        return self.normalize_lines(_LINE_BREAK_RE.split(text))
