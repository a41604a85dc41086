"""Text file reading for macro inputs."""

from __future__ import annotations

import errno
from pathlib import Path

from ..errors import ErrorKind, MacroExpansionError


_REASONS = {
    errno.ENOENT: "file not found",
    errno.EACCES: "permission denied",
    errno.EPERM: "permission denied",
    errno.EISDIR: "is a directory",
}


def describe_os_error(exc: OSError) -> str:
    """Return a short reason for an OS-level read failure."""

    if exc.errno in _REASONS:
        return _REASONS[exc.errno]
    return f"I/O error: {exc.strerror or exc}"


class TextFileReader:
    """Read a text file as lines in a single filesystem read."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_lines(self, path: Path) -> list[str]:
        """Return file lines without line terminators.

        Raises:
            MacroExpansionError: `READ_FAILURE` wrapping the OS or decode reason.
        """

        try:
            content = path.read_text(encoding=self.encoding)
        except OSError as exc:
            raise MacroExpansionError(
                kind=ErrorKind.READ_FAILURE,
                detail=f"Failed to read `{path}`: {describe_os_error(exc)}.",
                path=str(path),
            ) from exc
        except UnicodeDecodeError as exc:
            raise MacroExpansionError(
                kind=ErrorKind.READ_FAILURE,
                detail=f"Failed to decode `{path}` as {self.encoding}: {exc.reason}.",
                path=str(path),
                hint="Save the file as UTF-8 or configure `encoding`.",
            ) from exc
        return content.split("\n")
