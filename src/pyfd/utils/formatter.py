"""
Output rendering for matched paths.

``EntryPrinter`` writes one matched path per line to standard output. With
color enabled the path is wrapped in the ANSI codes of its entry kind:

    - symlink: magenta
    - directory: cyan
    - anything else: white

Colors are emitted whenever color is enabled, terminal or not; ``--no-color``
or the ``NO_COLOR`` environment variable turns them off. The path itself is
always written verbatim: it is never parsed as rich markup, and tabs and
control characters in file names are left alone.
"""

from __future__ import annotations

from typing import IO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from ..core.types import EntryKind, Match

KIND_STYLES: dict[EntryKind, str] = {
    EntryKind.SYMLINK: "magenta",
    EntryKind.DIRECTORY: "cyan",
    EntryKind.OTHER: "white",
}


def style_for(kind: EntryKind) -> str:
    return KIND_STYLES[kind]


class EntryPrinter:
    """Print matches in discovery order, one per line."""

    def __init__(self, colored: bool = True, file: IO[str] | None = None) -> None:
        self.console = Console(
            file=file,
            color_system="standard" if colored else None,
            force_terminal=colored,
            no_color=None if colored else True,
            highlight=False,
            markup=False,
            emoji=False,
        )
        self.colored = colored and not self.console.no_color
        self.styles = {kind: Style(color=color) for kind, color in KIND_STYLES.items()}

    def __call__(self, match: Match) -> None:
        self.print_match(match)

    def render(self, match: Match) -> str:
        if not self.colored:
            return match.text
        return self.styles[match.entry.kind].render(
            match.text, color_system=ColorSystem.STANDARD
        )

    def print_match(self, match: Match) -> None:
        out = self.console.file
        out.write(self.render(match) + "\n")
        out.flush()
