"""
Core configuration, data types and the scan pipeline.

``scanner`` is imported explicitly by callers to keep this package free of
import cycles with ``pyfd.search``.
"""

from .config import FinderConfig
from .types import DirEntry, EntryKind, Match

__all__ = [
    "FinderConfig",
    "DirEntry",
    "EntryKind",
    "Match",
]
