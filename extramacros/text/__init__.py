"""Text cleanup and normalization components.

This package provides the deterministic comment filtering and whitespace
collapsing used to turn a file into one macro-ready line.
"""

from .cleaners import (
    DEFAULT_COMMENT_PREFIXES,
    CollapseWhitespace,
    DropCommentLines,
    StripLines,
)
from .normalizer import TextNormalizer

__all__ = [
    "DEFAULT_COMMENT_PREFIXES",
    "TextNormalizer",
    "DropCommentLines",
    "StripLines",
    "CollapseWhitespace",
]
