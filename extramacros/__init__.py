"""Top-level package for extramacros.

This package provides the `ReadFromFile` host macro, which turns a small text
file into one whitespace-normalized line. The core entry point is
`FileTextNormalizer`; `ReadFromFileMacro` adapts it to host macro calls.
"""

from .errors import ErrorKind, MacroExpansionError
from .macros import ReadFromFileMacro
from .normalizer import FileTextNormalizer, NormalizationResult

__all__ = [
    "ErrorKind",
    "FileTextNormalizer",
    "MacroExpansionError",
    "NormalizationResult",
    "ReadFromFileMacro",
    "__version__",
]

__version__ = "0.1.0"
