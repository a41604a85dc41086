"""Domain exceptions and error kinds for macro expansion diagnostics."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Inspectable failure categories reported by macro expansion."""

    MISSING_PATH = "missing_path"
    INVALID_PATH = "invalid_path"
    READ_FAILURE = "read_failure"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_PATH: "ReadFromFile requires a file path argument.",
    ErrorKind.INVALID_PATH: "ReadFromFile could not interpret `{path}` as a file path.",
    ErrorKind.READ_FAILURE: "ReadFromFile could not read `{path}`.",
}


class CommandStageError(RuntimeError):
    """Raised when a CLI command fails outside macro expansion itself."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class MacroExpansionError(RuntimeError):
    """Raised when a macro cannot produce a value for its arguments."""

    def __init__(
        self,
        *,
        kind: ErrorKind,
        detail: str,
        path: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a kind-scoped macro expansion error."""

        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.path = path
        self.hint = hint

    @property
    def message(self) -> str:
        """Return the default human-readable reason for host display."""

        template = DEFAULT_MESSAGES[self.kind]
        return template.format(path=self.path or "")
