"""
Error classification and reporting for pyfd.

Two kinds of failure exist during a run:

- Fatal errors (malformed pattern, unreadable working directory) are raised
  as ``FinderError`` subclasses and turned into a single ``Error: ...`` line
  and exit status 1 by the CLI.
- Per-entry failures (permission denied, vanished files, broken or looping
  symlinks, paths that are not valid UTF-8) are recoverable. They are handed
  to ``handle_walk_error`` which classifies and logs them at DEBUG level; the
  entry is skipped and traversal continues.

Example:
    >>> from pyfd.utils.error_handling import PatternError
    >>> try:
    ...     raise PatternError("missing )", pattern="(a")
    ... except PatternError as e:
    ...     print(e.category.value)
    pattern
"""

from __future__ import annotations

import builtins
import errno
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    FILESYSTEM_LOOP = "filesystem_loop"
    ENCODING = "encoding"
    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class FinderError(Exception):
    """Base exception for pyfd errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        path: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.path: Path | None = path
        self.context: dict[str, Any] = context or {}


class PatternError(FinderError):
    """The search pattern is not a well-formed regular expression."""

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PATTERN,
            context={"pattern": pattern, "position": position},
        )
        self.pattern: str = pattern
        self.position: int | None = position


class WorkingDirectoryError(FinderError):
    """The current working directory cannot be determined or read."""

    def __init__(self, message: str = "Could not get current directory!") -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION)


class FilesystemLoopError(FinderError):
    """A followed symlink points back at one of its own ancestors."""

    def __init__(self, path: Path, ancestor: Path) -> None:
        super().__init__(
            f"File system loop found: {path} points to an ancestor {ancestor}",
            category=ErrorCategory.FILESYSTEM_LOOP,
            path=path,
            context={"ancestor": str(ancestor)},
        )
        self.ancestor: Path = ancestor


def classify_error(exception: BaseException) -> ErrorCategory:
    """Classify a traversal exception into an error category."""
    if isinstance(exception, FinderError):
        return exception.category
    if isinstance(exception, UnicodeError):
        return ErrorCategory.ENCODING
    if isinstance(exception, BuiltinPermissionError):
        return ErrorCategory.PERMISSION
    if isinstance(exception, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return ErrorCategory.FILE_ACCESS
    if isinstance(exception, OSError):
        if exception.errno == errno.ELOOP:
            return ErrorCategory.FILESYSTEM_LOOP
        if exception.errno in (errno.EACCES, errno.EPERM):
            return ErrorCategory.PERMISSION
        return ErrorCategory.FILE_ACCESS
    return ErrorCategory.UNKNOWN


def handle_walk_error(path: Path, exception: BaseException, logger: Any | None = None) -> None:
    """
    Record a recoverable per-entry traversal failure.

    The failure is classified and, when a logger is given, logged at DEBUG
    level. Nothing is raised; the caller skips the entry.

    Args:
        path: Path of the entry whose traversal step failed
        exception: The exception raised by the filesystem call
        logger: Optional ``FinderLogger`` to report the skip to
    """
    category = classify_error(exception)
    if logger is not None:
        logger.log_entry_skipped(str(path), str(exception), category=category.value)
