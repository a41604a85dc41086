"""Observability helpers for macro expansion."""

from .logger import LoggingFailureReporter, MacroLogger

__all__ = ["MacroLogger", "LoggingFailureReporter"]
