"""
Recursive directory walker.

``walk`` yields one ``DirEntry`` per filesystem entry below a root, in
depth-first pre-order: a directory is yielded before its children, and the
children of each directory are visited sorted by name so repeated walks over
an unmodified tree produce the same sequence.

Features:
    - Optional symlink following, with filesystem-loop detection
    - A prune predicate evaluated before an entry is yielded or descended into,
      so a rejected directory's subtree is never listed
    - Tolerant traversal: entries whose step fails are skipped and reported to
      the logger at DEBUG level instead of aborting the walk

Example:
    >>> from pyfd.utils.walker import walk
    >>> for entry in walk(".", prune=lambda e: not e.name.startswith(".")):
    ...     print(entry.depth, entry.path)
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from ..core.types import DirEntry
from .error_handling import FilesystemLoopError, handle_walk_error

FileId = tuple[int, int]


def _file_id(path: Path) -> FileId:
    st = os.stat(path)
    return st.st_dev, st.st_ino


def _entry_from_scandir(item: os.DirEntry[str], depth: int, follow_links: bool) -> DirEntry:
    """Build a DirEntry, resolving the link target when links are followed."""
    is_symlink = item.is_symlink()
    if is_symlink and follow_links:
        # Raises for a dangling link; the caller skips the entry.
        is_dir = stat.S_ISDIR(os.stat(item.path).st_mode)
    else:
        is_dir = item.is_dir(follow_symlinks=False)
    return DirEntry(path=Path(item.path), depth=depth, is_symlink=is_symlink, is_dir=is_dir)


def _read_dir(
    directory: DirEntry, follow_links: bool, logger: Any | None
) -> Iterator[DirEntry]:
    try:
        with os.scandir(directory.path) as it:
            items = sorted(it, key=lambda item: item.name)
    except OSError as exc:
        handle_walk_error(directory.path, exc, logger)
        return

    depth = directory.depth + 1
    for item in items:
        try:
            yield _entry_from_scandir(item, depth, follow_links)
        except OSError as exc:
            handle_walk_error(Path(item.path), exc, logger)


def walk(
    root: str | os.PathLike[str],
    *,
    follow_links: bool = False,
    prune: Callable[[DirEntry], bool] | None = None,
    logger: Any | None = None,
) -> Iterator[DirEntry]:
    """
    Walk the tree under ``root`` lazily, depth first.

    The root itself is yielded first with depth 0 and is not passed to
    ``prune``. Every other entry is passed to ``prune`` before anything else
    happens to it; an entry for which it returns False is neither yielded nor
    descended into.

    Args:
        root: Directory to start from
        follow_links: Descend into symlinked directories. A dangling link then
            cannot be classified and is skipped, and a link resolving to one
            of its own ancestors is skipped as a filesystem loop. Without
            following, links are yielded as themselves and never descended.
        prune: Predicate deciding whether an entry is kept
        logger: Optional ``FinderLogger`` receiving skipped-entry reports

    Yields:
        DirEntry values; the iterator cannot be restarted
    """
    root_path = Path(root)
    try:
        root_entry = DirEntry(
            path=root_path,
            depth=0,
            is_symlink=root_path.is_symlink(),
            is_dir=stat.S_ISDIR(os.stat(root_path).st_mode),
        )
        ancestors: list[tuple[FileId, Path]] = [(_file_id(root_path), root_path)]
    except OSError as exc:
        handle_walk_error(root_path, exc, logger)
        return

    yield root_entry
    if not root_entry.is_dir:
        return

    stack: list[Iterator[DirEntry]] = [_read_dir(root_entry, follow_links, logger)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            ancestors.pop()
            continue

        if prune is not None and not prune(entry):
            continue

        file_id: FileId = (0, 0)
        if entry.is_dir and follow_links:
            try:
                file_id = _file_id(entry.path)
                for ancestor_id, ancestor_path in ancestors:
                    if ancestor_id == file_id:
                        raise FilesystemLoopError(entry.path, ancestor_path)
            except (OSError, FilesystemLoopError) as exc:
                handle_walk_error(entry.path, exc, logger)
                continue

        yield entry

        if entry.is_dir:
            stack.append(_read_dir(entry, follow_links, logger))
            ancestors.append((file_id, entry.path))
