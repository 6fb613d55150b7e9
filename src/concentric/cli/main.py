"""Concentric CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from dataclasses import replace

import click

from concentric import __version__
from concentric.comparator import UnknownPlacement
from concentric.config import SortConfig, load_config
from concentric.errors import ConcentricError
from concentric.selection import LineSelection, sort_document_text

logger = logging.getLogger(__name__)


def _parse_line_range(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> LineSelection | None:
    """Parse a one-based inclusive ``START:END`` range into a LineSelection."""
    if value is None:
        return None
    start_s, sep, end_s = value.partition(":")
    if not sep:
        raise click.BadParameter(f"expected START:END, got {value!r}")
    try:
        start, end = int(start_s), int(end_s)
    except ValueError:
        raise click.BadParameter(f"line numbers must be integers: {value!r}") from None
    if start < 1 or end < 1:
        raise click.BadParameter(f"line numbers start at 1: {value!r}")
    return LineSelection(start - 1, end - 1)


def _load(config_path: str | None) -> SortConfig:
    try:
        return load_config(config_path)
    except ConcentricError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _replace_file(path: str, text: str) -> None:
    """Write *text* to a sibling temp file, then move it over *path*."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".concentric-", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.chmod(tmp_path, os.stat(path).st_mode & 0o7777)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


@click.group()
@click.version_option(version=__version__, prog_name="concentric")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug)")
def cli(verbose: int) -> None:
    """Concentric - sort CSS declarations from the outside of the box in."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@cli.command()
@click.argument(
    "file",
    required=False,
    default="-",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--unknown-first/--unknown-last",
    default=False,
    help="Put properties missing from the order before or after known ones",
)
@click.option("--dedup", is_flag=True, help="Drop lines that repeat a property")
@click.option(
    "--filter-blank/--no-filter-blank",
    default=None,
    help="Remove blank lines (overrides the settings file)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON settings file with sortConcentrically.* keys",
)
@click.option(
    "--lines",
    "selection",
    callback=_parse_line_range,
    help="Only sort lines START:END (1-based, inclusive)",
)
@click.option("--strict", is_flag=True, help="Fail on lines without a ':' separator")
@click.option("--in-place", is_flag=True, help="Rewrite FILE instead of printing")
def sort(
    file: str,
    unknown_first: bool,
    dedup: bool,
    filter_blank: bool | None,
    config_path: str | None,
    selection: LineSelection | None,
    strict: bool,
    in_place: bool,
) -> None:
    """Sort declaration lines read from FILE (or stdin) concentrically."""
    if in_place and file == "-":
        raise click.UsageError("--in-place needs a FILE")

    config = _load(config_path)
    if filter_blank is not None:
        config = replace(config, filter_blank_lines=filter_blank)

    if file == "-":
        text = click.get_binary_stream("stdin").read().decode("utf-8")
    else:
        # newline="" keeps \r\n intact so it can be written back unchanged
        with open(file, encoding="utf-8", newline="") as fh:
            text = fh.read()

    placement = UnknownPlacement.FIRST if unknown_first else UnknownPlacement.LAST
    logger.info("Sorting %s (unknown properties %s)", file, placement.value)

    try:
        result = sort_document_text(
            text,
            selection=selection,
            config=config,
            placement=placement,
            dedup=dedup,
            strict=strict,
        )
    except ConcentricError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if in_place:
        _replace_file(file, result)
        click.echo(f"Sorted {file}", err=True)
    else:
        # bytes skip newline translation so \r\n reaches stdout unchanged
        click.echo(result.encode("utf-8"), nl=False)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON settings file with sortConcentrically.* keys",
)
def order(config_path: str | None) -> None:
    """Print the active property order, one name per line."""
    config = _load(config_path)
    for name in config.priority_index().names:
        click.echo(name)
