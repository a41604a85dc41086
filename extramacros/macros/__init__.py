"""Host macro adapters."""

from .read_from_file import FailureReporter, ReadFromFileMacro

__all__ = ["FailureReporter", "ReadFromFileMacro"]
