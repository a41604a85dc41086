"""`ReadFromFile` macro adapter.

Responsibilities:
- Map host macro arguments onto `FileTextNormalizer`.
- Hand every failure to a host-supplied `FailureReporter`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..errors import MacroExpansionError
from ..normalizer import FileTextNormalizer
from ..parsing import normalize_optional_string
from ..telemetry.logger import MacroLogger


class FailureReporter(Protocol):
    """Host collaborator that displays macro failures."""

    def report(self, error: MacroExpansionError) -> None:
        """Show one failure to the user."""


class ReadFromFileMacro:
    """Expand to the normalized single-line content of a text file."""

    name = "ReadFromFile"
    description = (
        "Reads a text file, skips lines starting with # or //, "
        "and returns the remaining text as one whitespace-normalized line."
    )

    def __init__(
        self,
        reporter: FailureReporter,
        normalizer: FileTextNormalizer | None = None,
        base_dir: str | Path | None = None,
        logger: MacroLogger | None = None,
    ) -> None:
        self.reporter = reporter
        self.normalizer = normalizer or FileTextNormalizer()
        self.base_dir = base_dir
        self.logger = logger

    def expand(self, *args: str | None) -> str | None:
        """Return the expanded value, or `None` after reporting a failure.

        Only the first argument is used. A file without usable content also
        expands to `None` but reports nothing.
        """

        path_input = args[0] if args else None
        if self.logger is not None:
            self.logger.log_expand_start(self.name, normalize_optional_string(path_input))

        result = self.normalizer.normalize(path_input, self.base_dir)
        if result.error is not None:
            self._fail(result.error)
            return None

        if self.logger is not None:
            self.logger.log_expand_complete(self.name, has_content=result.text is not None)
        return result.text

    def _fail(self, error: MacroExpansionError) -> None:
        if self.logger is not None:
            self.logger.log_expand_failure(self.name, error)
        self.reporter.report(error)
