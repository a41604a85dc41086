"""Structured macro event logging.

Responsibilities:
- Emit concise, deterministic macro-level runtime logs through `loguru`.
- Never include file content in log lines.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

from ..errors import MacroExpansionError


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class MacroLogger:
    """Emit deterministic event lines for macro expansions."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, macro: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[macro] level={level} macro={macro} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_expand_start(self, macro: str, path: str | None) -> None:
        """Emit an expansion-start event."""

        self._emit("INFO", "start", macro, path=path or "")

    def log_expand_complete(self, macro: str, has_content: bool) -> None:
        """Emit an expansion-complete event without the expanded value."""

        self._emit("INFO", "complete", macro, content="present" if has_content else "empty")

    def log_expand_failure(self, macro: str, error: MacroExpansionError) -> None:
        """Emit an expansion-failure event carrying only the error kind."""

        self._emit("ERROR", "failure", macro, error_kind=error.kind.value)


class LoggingFailureReporter:
    """Failure reporter that writes host-facing messages to the log."""

    def report(self, error: MacroExpansionError) -> None:
        """Log the default message and diagnostic detail of a failure."""

        _loguru_logger.error("{} {}", error.message, error.detail)
