"""
Pattern compilation and per-entry matching.

Functions:
    compile_pattern: Build the run's compiled pattern, raising PatternError
    candidate_text: Pick the string an entry is tested against
    match_entry: Test one entry and return the path string to print

Matching is an unanchored search: the pattern may occur anywhere in the
candidate string.
"""

from __future__ import annotations

from pathlib import Path, PurePath

import regex as regex_mod

from ..core.config import FinderConfig
from ..core.types import DirEntry, Match
from ..utils.error_handling import PatternError


def compile_pattern(pattern: str, case_sensitive: bool) -> regex_mod.Pattern:
    """
    Compile ``pattern`` with the regex engine.

    Raises:
        PatternError: if the pattern is not a well-formed regular expression
    """
    flags = 0 if case_sensitive else regex_mod.IGNORECASE
    try:
        return regex_mod.compile(pattern, flags=flags)
    except regex_mod.error as exc:
        raise PatternError(str(exc), pattern=pattern, position=getattr(exc, "pos", None)) from exc


def candidate_text(entry: DirEntry, relative: PurePath, config: FinderConfig) -> str | None:
    """Return the string to match, or None if the entry is not eligible."""
    if config.search_full_path:
        return str(relative)
    # Filename mode only considers regular files, following symlinks.
    if not Path(entry.path).is_file():
        return None
    return relative.name


def match_entry(
    entry: DirEntry, relative: PurePath, pattern: regex_mod.Pattern, config: FinderConfig
) -> Match | None:
    text = candidate_text(entry, relative, config)
    if text is None or pattern.search(text) is None:
        return None
    return Match(entry=entry, text=str(relative))
