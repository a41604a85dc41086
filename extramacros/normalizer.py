"""File-to-single-line normalization.

Responsibilities:
- Resolve a macro path argument, read the file once, and normalize its lines.
- Recover every expansion failure into a structured, inspectable result.

Key types:
- `FileTextNormalizer`: the normalization entry point.
- `NormalizationResult`: normalized text or a `MacroExpansionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import MacroConfig
from .errors import ErrorKind, MacroExpansionError
from .io.paths import clean_path_argument, resolve_path, validate_path_syntax
from .io.reader import TextFileReader
from .text.normalizer import TextNormalizer


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Outcome of one normalization call.

    Attributes:
        text: Normalized single-line text, or `None` when the file had no
            usable content or the call failed.
        error: Failure details, or `None` on success.
    """

    text: str | None = None
    error: MacroExpansionError | None = None

    @property
    def ok(self) -> bool:
        """Return whether the call succeeded, with or without content."""

        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Return the failure kind, if any."""

        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str | None:
        """Return the default human-readable failure message, if any."""

        return self.error.message if self.error is not None else None


class FileTextNormalizer:
    """Read a text file and return its content as one normalized line."""

    def __init__(self, config: MacroConfig | None = None) -> None:
        """Initialize reader and text rules from configuration."""

        self.config = config or MacroConfig()
        self.config.validate()
        self._reader = TextFileReader(encoding=self.config.encoding)
        self._text_normalizer = TextNormalizer(self.config.comment_prefixes)

    def resolve(self, path_input: str | None, base_dir: str | Path | None = None) -> Path:
        """Clean, validate, and resolve a path argument.

        Raises:
            MacroExpansionError: `MISSING_PATH` or `INVALID_PATH`.
        """

        path_text = clean_path_argument(path_input)
        validate_path_syntax(path_text)
        return resolve_path(
            path_text,
            base_dir,
            confine_to_base_dir=self.config.confine_to_base_dir,
        )

    def normalize(
        self, path_input: str | None, base_dir: str | Path | None = None
    ) -> NormalizationResult:
        """Normalize the file named by `path_input` into a single line.

        Args:
            path_input: Raw, possibly quoted, possibly relative path argument.
            base_dir: Directory for relative paths; falls back to the
                configured `base_dir`, then to the working directory.

        Returns:
            A successful result with text (or `None` for no usable content),
            or a failed result carrying a `MacroExpansionError`.
        """

        effective_base = base_dir if base_dir is not None else self.config.base_dir
        try:
            path = self.resolve(path_input, effective_base)
            lines = self._reader.read_lines(path)
        except MacroExpansionError as exc:
            return NormalizationResult(error=exc)
        return NormalizationResult(text=self._text_normalizer.normalize_lines(lines))
