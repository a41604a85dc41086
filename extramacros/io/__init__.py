"""Input stage components for macro expansion.

This package contains path argument resolution and the single-read text file
reader used by `FileTextNormalizer`.
"""

from .paths import clean_path_argument, resolve_path, validate_path_syntax
from .reader import TextFileReader

__all__ = ["clean_path_argument", "validate_path_syntax", "resolve_path", "TextFileReader"]
