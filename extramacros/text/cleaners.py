"""Deterministic line and whitespace cleaning rules.

Responsibilities:
- Provide composable rules that turn raw file lines into macro-ready text.
- Keep cleanup predictable so repeated runs produce identical output.
"""

from __future__ import annotations

import re
from typing import Iterable, Protocol


DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = ("#", "//")


class LineRule(Protocol):
    """Protocol for rules operating on a sequence of lines."""

    def apply(self, lines: Iterable[str]) -> list[str]:
        """Apply a single line-level transformation."""


class DropCommentLines:
    """Remove lines whose left-trimmed content starts with a comment prefix.

    Blank lines are kept; they disappear later during whitespace collapse.
    """

    def __init__(self, prefixes: Iterable[str] = DEFAULT_COMMENT_PREFIXES) -> None:
        """Initialize the rule with the accepted comment prefixes."""

        self.prefixes = tuple(prefixes)
        if not self.prefixes:
            raise ValueError("At least one comment prefix is required.")

    def is_comment(self, line: str) -> bool:
        """Return whether the line is a comment line."""

        return line.lstrip().startswith(self.prefixes)

    def apply(self, lines: Iterable[str]) -> list[str]:
        """Return lines without comment lines, preserving order."""

        return [line for line in lines if not self.is_comment(line)]


class StripLines:
    """Trim leading and trailing whitespace from every line."""

    def apply(self, lines: Iterable[str]) -> list[str]:
        """Apply per-line trimming."""

        return [line.strip() for line in lines]


class CollapseWhitespace:
    """Collapse every whitespace run, newlines included, to one space."""

    _WHITESPACE_RE = re.compile(r"\s+")

    def apply(self, text: str) -> str:
        """Collapse whitespace runs and strip the ends."""

        return self._WHITESPACE_RE.sub(" ", text).strip()
