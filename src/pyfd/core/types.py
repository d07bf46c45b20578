"""
Core data types for pyfd.

Key Types:
    EntryKind: Closed classification of a directory entry used for coloring
    DirEntry: One transient step of a directory traversal
    Match: A directory entry together with the string that matched
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Display classification of a directory entry."""

    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class DirEntry:
    """
    A single entry produced by the directory walker.

    Attributes:
        path: Full path of the entry (the root joined with the relative path)
        depth: Distance from the walk root; the root itself has depth 0
        is_symlink: Whether the entry itself is a symbolic link
        is_dir: Whether the entry is a directory. When symlinks are followed
            this describes the link target, otherwise the link itself.
    """

    path: Path
    depth: int
    is_symlink: bool = False
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def kind(self) -> EntryKind:
        if self.is_symlink:
            return EntryKind.SYMLINK
        if self.is_dir:
            return EntryKind.DIRECTORY
        return EntryKind.OTHER


@dataclass(frozen=True, slots=True)
class Match:
    """A matched entry and the path string printed for it."""

    entry: DirEntry
    text: str
