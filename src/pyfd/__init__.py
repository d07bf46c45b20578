"""
pyfd: find entries in a directory tree by regular expression.

pyfd walks the current directory depth first and prints every path, or file
name, matching a pattern. Hidden entries are skipped unless requested, symlinks
are followed on request, and output is colored by entry kind.

Main API:
    FinderConfig: Immutable run configuration derived from flags and pattern
    compile_pattern: Compile a pattern with smart-case flags
    walk: Lazy depth-first directory walker
    iter_candidates: Walker plus hidden pruning and root exclusion
    search: Lazy sequence of matches
    scan: Print all matches

Example Usage:
    >>> from pyfd import FinderConfig, compile_pattern, search
    >>> cfg = FinderConfig.from_flags("readme", no_color=True)
    >>> pattern = compile_pattern("readme", cfg.case_sensitive)
    >>> for match in search(".", pattern, cfg):
    ...     print(match.text)

    CLI usage:
        $ pyfd readme
        $ pyfd -f --hidden '\\.toml$'
"""

__version__ = "0.1.0"

from .core.config import FinderConfig
from .core.scanner import is_hidden, iter_candidates, scan, search
from .core.types import DirEntry, EntryKind, Match
from .search.matchers import compile_pattern
from .utils.error_handling import FinderError, PatternError, WorkingDirectoryError
from .utils.walker import walk

__all__ = [
    "__version__",
    "FinderConfig",
    "DirEntry",
    "EntryKind",
    "Match",
    "compile_pattern",
    "walk",
    "is_hidden",
    "iter_candidates",
    "search",
    "scan",
    "FinderError",
    "PatternError",
    "WorkingDirectoryError",
]
