"""
Utility modules: directory walking, output, logging and error handling.
"""

from .error_handling import (
    ErrorCategory,
    FilesystemLoopError,
    FinderError,
    PatternError,
    WorkingDirectoryError,
    classify_error,
    handle_walk_error,
)
from .formatter import EntryPrinter
from .logging_config import configure_logging, disable_logging, get_logger
from .walker import walk

__all__ = [
    # Error handling
    "ErrorCategory",
    "FilesystemLoopError",
    "FinderError",
    "PatternError",
    "WorkingDirectoryError",
    "classify_error",
    "handle_walk_error",
    # Output
    "EntryPrinter",
    # Logging
    "configure_logging",
    "disable_logging",
    "get_logger",
    # Traversal
    "walk",
]
