"""Macro path argument resolution.

Responsibilities:
- Clean raw macro arguments into path text.
- Reject path text the host filesystem cannot represent.
- Resolve relative paths against an optional base directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import ErrorKind, MacroExpansionError
from ..parsing import strip_surrounding_quotes


_WINDOWS_RESERVED_CHARACTERS = frozenset('<>"|?*')


def clean_path_argument(raw: str | None) -> str:
    """Return trimmed, unquoted path text or raise `MISSING_PATH`."""

    cleaned = strip_surrounding_quotes(raw)
    if cleaned is None:
        raise MacroExpansionError(
            kind=ErrorKind.MISSING_PATH,
            detail="No file path argument was supplied.",
            hint="Pass the file to read, for example `ReadFromFile(args.txt)`.",
        )
    return cleaned


def validate_path_syntax(path_text: str, *, windows: bool | None = None) -> None:
    """Raise `INVALID_PATH` when the text contains illegal path characters."""

    is_windows = os.name == "nt" if windows is None else windows
    for position, character in enumerate(path_text):
        if character == "\x00":
            reason = "NUL character"
        elif is_windows and (character in _WINDOWS_RESERVED_CHARACTERS or ord(character) < 32):
            reason = f"reserved character {character!r}"
        else:
            continue
        raise MacroExpansionError(
            kind=ErrorKind.INVALID_PATH,
            detail=f"Illegal {reason} at index {position} in path `{path_text!r}`.",
            path=path_text,
        )


def _is_within(base: str, candidate: str) -> bool:
    """Return whether `candidate` lies at or below `base` once both are made absolute."""

    try:
        absolute_base = os.path.abspath(base)
        return os.path.commonpath([absolute_base, os.path.abspath(candidate)]) == absolute_base
    except ValueError:
        return False


def resolve_path(
    path_text: str,
    base_dir: str | Path | None = None,
    *,
    confine_to_base_dir: bool = False,
) -> Path:
    """Resolve path text to a lexically normalized filesystem path.

    Absolute paths, and any path when no base directory is given, are only
    normalized. Relative paths are joined onto `base_dir` first. `.` and `..`
    segments are folded without touching the filesystem.

    Raises:
        MacroExpansionError: `INVALID_PATH` when confinement is enabled and the
            resolved path escapes `base_dir`.
    """

    candidate = Path(path_text)
    if candidate.is_absolute() or base_dir is None:
        return Path(os.path.normpath(candidate))

    base = os.path.normpath(base_dir)
    resolved = os.path.normpath(os.path.join(base, candidate))
    if confine_to_base_dir and not _is_within(base, resolved):
        raise MacroExpansionError(
            kind=ErrorKind.INVALID_PATH,
            detail=f"Path `{path_text}` resolves outside base directory `{base}`.",
            path=path_text,
            hint="Use a path inside the base directory or disable confinement.",
        )
    return Path(resolved)
