"""
Command-line interface for pyfd.

Scans the current working directory recursively and prints every path that
matches a regular expression.

Example Usage:
    Everything below the current directory:
        $ pyfd

    Smart case: lowercase patterns ignore case, uppercase letters enforce it:
        $ pyfd readme
        $ pyfd README

    Match file names only, include hidden entries, follow symlinks:
        $ pyfd -f --hidden -F '\\.py$'

Exit status is 0 on success (also when nothing matched) and 1 on help, on a
malformed flag, when the current directory cannot be read, or when the pattern
is not a valid regular expression.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import click

from .. import __version__
from ..core.config import FinderConfig
from ..core.scanner import scan
from ..search.matchers import compile_pattern
from ..utils.error_handling import PatternError, WorkingDirectoryError
from ..utils.logging_config import LogFormat, LogLevel, configure_logging


class CliError(click.ClickException):
    """Fatal error reported as a single ``Error: ...`` line on stderr."""

    exit_code = 1


class FinderCommand(click.Command):
    """Command whose usage errors exit with status 1 and a one-line message."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            raise CliError(exc.format_message()) from exc


def _show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help())
    ctx.exit(1)


def current_dir() -> Path:
    try:
        return Path(os.getcwd())
    except OSError as exc:
        raise WorkingDirectoryError() from exc


@click.command(
    cls=FinderCommand,
    add_help_option=False,
    context_settings={"allow_extra_args": True},
)
@click.option(
    "-h",
    "--help",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_help,
    help="print this help message",
)
@click.option("-s", "--sensitive", is_flag=True, help="case-sensitive search (default: smart case)")
@click.option("-f", "--filename", is_flag=True, help="search filenames only (default: full path)")
@click.option("--hidden", is_flag=True, help="search hidden files/directories (default: off)")
@click.option("-F", "--follow", is_flag=True, help="follow symlinks (default: off)")
@click.option("-n", "--no-color", is_flag=True, help="do not colorize output")
@click.option("--debug", is_flag=True, help="log diagnostics (skipped entries, timing) to stderr")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="also write diagnostics to this file",
)
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value,
    show_default=True,
    help="format of diagnostic log lines",
)
@click.version_option(__version__, "--version", prog_name="pyfd")
@click.argument("pattern", required=False, default="")
def cli(
    pattern: str,
    sensitive: bool,
    filename: bool,
    hidden: bool,
    follow: bool,
    no_color: bool,
    debug: bool,
    log_file: Path | None,
    log_format: str,
) -> None:
    """Recursively find paths below the current directory matching PATTERN."""
    configure_logging(
        level=LogLevel.DEBUG if debug else LogLevel.WARNING,
        format_type=LogFormat(log_format),
        log_file=log_file,
        enable_file=log_file is not None,
    )

    try:
        root = current_dir()
    except WorkingDirectoryError as exc:
        raise CliError(exc.message) from exc

    config = FinderConfig.from_flags(
        pattern,
        sensitive=sensitive,
        filename=filename,
        hidden=hidden,
        follow=follow,
        no_color=no_color,
    )

    try:
        compiled = compile_pattern(pattern, config.case_sensitive)
    except PatternError as exc:
        raise CliError(exc.message) from exc

    scan(root, compiled, config)


def main(args: Any = None) -> None:
    cli(args=args, prog_name="pyfd")


if __name__ == "__main__":
    main()
