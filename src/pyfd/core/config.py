"""
Configuration module for pyfd.

``FinderConfig`` is the one configuration snapshot of a run. It is built once
from the command-line flags and the pattern text, then passed read-only to the
walker, the matcher and the printer.

Example:
    >>> from pyfd.core.config import FinderConfig
    >>> cfg = FinderConfig.from_flags("readme")
    >>> cfg.case_sensitive, cfg.search_full_path
    (False, True)
    >>> FinderConfig.from_flags("Readme").case_sensitive
    True
"""

from __future__ import annotations

from dataclasses import dataclass


def has_uppercase(pattern: str) -> bool:
    """Smart case: any uppercase character makes the search case sensitive."""
    return any(ch.isupper() for ch in pattern)


@dataclass(frozen=True, slots=True)
class FinderConfig:
    # Matching
    case_sensitive: bool = False
    search_full_path: bool = True

    # Traversal
    search_hidden: bool = False
    follow_links: bool = False

    # Output
    colored: bool = True

    @classmethod
    def from_flags(
        cls,
        pattern: str,
        *,
        sensitive: bool = False,
        filename: bool = False,
        hidden: bool = False,
        follow: bool = False,
        no_color: bool = False,
    ) -> FinderConfig:
        """
        Derive the configuration from raw flags and the pattern text.

        ``sensitive`` is OR-ed with smart case: it forces case-sensitive
        matching for an all-lowercase pattern and changes nothing when the
        pattern already contains an uppercase letter.
        """
        return cls(
            case_sensitive=sensitive or has_uppercase(pattern),
            search_full_path=not filename,
            search_hidden=hidden,
            follow_links=follow,
            colored=not no_color,
        )
