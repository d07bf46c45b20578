"""
Traversal, filtering and matching pipeline.

    walk(root) -> prune hidden -> drop root -> relative path -> match -> print

Every stage is lazy: entries are pulled from the walker one at a time and
printed as soon as they match, so nothing is collected in memory.

Functions:
    is_hidden: Hidden-entry predicate on the bare entry name
    iter_candidates: Eligible entries below the root with their relative paths
    search: Lazy sequence of matches
    scan: Print every match and return how many were printed
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path, PurePath

import regex as regex_mod

from ..search.matchers import match_entry
from ..utils.error_handling import handle_walk_error
from ..utils.formatter import EntryPrinter
from ..utils.logging_config import get_logger
from ..utils.walker import walk
from .config import FinderConfig
from .types import DirEntry, Match

HIDDEN_MARKER = "."


def is_hidden(entry: DirEntry) -> bool:
    return entry.name.startswith(HIDDEN_MARKER)


def iter_candidates(
    root: str | os.PathLike[str], config: FinderConfig
) -> Iterator[tuple[DirEntry, PurePath]]:
    """
    Yield ``(entry, relative_path)`` for every entry eligible for matching.

    Hidden entries are pruned during the walk unless ``config.search_hidden``
    is set, which also drops everything beneath a hidden directory. The root
    itself is never yielded, nor is any entry whose relative path is not
    valid UTF-8; the walk still descends below such a directory.
    """
    root_path = Path(root)
    logger = get_logger()

    def keep(entry: DirEntry) -> bool:
        return config.search_hidden or not is_hidden(entry)

    for entry in walk(root_path, follow_links=config.follow_links, prune=keep, logger=logger):
        if entry.path == root_path:
            continue
        try:
            relative = entry.path.relative_to(root_path)
        except ValueError:
            continue
        try:
            # Undecodable bytes survive os.scandir as lone surrogates.
            str(relative).encode("utf-8")
        except UnicodeEncodeError as exc:
            handle_walk_error(entry.path, exc, logger)
            continue
        yield entry, relative


def search(
    root: str | os.PathLike[str], pattern: regex_mod.Pattern, config: FinderConfig
) -> Iterator[Match]:
    """Lazily yield every entry under ``root`` whose candidate string matches."""
    for entry, relative in iter_candidates(root, config):
        match = match_entry(entry, relative, pattern, config)
        if match is not None:
            yield match


def scan(
    root: str | os.PathLike[str],
    pattern: regex_mod.Pattern,
    config: FinderConfig,
    printer: Callable[[Match], None] | None = None,
) -> int:
    """
    Print every match below ``root`` in discovery order.

    Args:
        root: Directory to search; excluded from the output
        pattern: Compiled pattern from ``compile_pattern``
        config: Run configuration
        printer: Callable receiving each match; defaults to an ``EntryPrinter``
            writing to stdout with ``config.colored``

    Returns:
        Number of matches printed
    """
    if printer is None:
        printer = EntryPrinter(colored=config.colored)

    logger = get_logger()
    logger.log_scan_start(str(root), pattern.pattern)
    start = time.perf_counter()

    count = 0
    for match in search(root, pattern, config):
        printer(match)
        count += 1

    logger.log_scan_complete(count, (time.perf_counter() - start) * 1000.0)
    return count
