#!/usr/bin/env python3
# tab-width:4

# pylint: disable=too-many-arguments              # [R0913] oo many arguments (13/10) [R0913]
# pylint: disable=too-many-positional-arguments   # [R0917] oo many positional arguments [R0917]
# pylint: disable=invalid-name                    # [C0103] single letter var names, name too descriptive(!)

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import click

from .each_line_in_path import each_line_in_path
from .eachline import DEFAULT_CHUNK_SIZE
from .eachline import LineIterator
from .validation import ValidationError

logger = logging.getLogger(__name__)

SEPARATOR_NAMES = {
    "LF": b"\n",
    "CRLF": b"\r\n",
    "CR": b"\r",
    "NUL": b"\x00",
}

# =============================================================================
# Click CLI setup
# =============================================================================


@click.group(
    context_settings={"show_default": True, "max_content_width": 272},
    no_args_is_help=True,
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Log debug messages to stderr.",
)
def cli(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s %(levelname)s: %(message)s",
        )


def click_add_options(options):
    def _add_options(func):
        for option in reversed(options):
            func = option(func)
        return func

    return _add_options


CLICK_SPLIT_OPTIONS = [
    click.argument(
        "path",
        type=click.Path(path_type=Path, allow_dash=True, dir_okay=False),
    ),
    click.option(
        "--separator",
        default=None,
        help="Line separator: LF, CRLF, CR, NUL or literal text. Defaults to `LF`.",
    ),
    click.option(
        "--hex-separator",
        is_flag=True,
        help="Interpret --separator as hex (e.g., '0d0a' -> b'\\r\\n').",
    ),
    click.option(
        "--no-separator",
        is_flag=True,
        help="Do not split; the whole input is one line (still cut by --limit).",
    ),
    click.option(
        "--limit",
        type=int,
        default=None,
        help="Maximum bytes per line.",
    ),
    click.option(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Bytes read per read() call.",
    ),
]


def parse_separator(
    separator: None | str,
    *,
    hex_separator: bool,
    no_separator: bool,
) -> None | bytes:
    if no_separator:
        if separator is not None or hex_separator:
            raise click.ClickException(
                "--no-separator and --separator/--hex-separator are mutually exclusive."
            )
        return None
    if separator is None:
        if hex_separator:
            raise click.ClickException("--hex-separator requires --separator.")
        return SEPARATOR_NAMES["LF"]
    if hex_separator:
        try:
            parsed = bytes.fromhex(separator)
        except ValueError as e:
            raise click.ClickException(f"Invalid hex separator: {e}") from e
    else:
        parsed = SEPARATOR_NAMES.get(separator, separator.encode("utf-8"))
    if len(parsed) == 0:
        raise click.ClickException("--separator must not be empty (use --no-separator)")
    return parsed


def open_lines(
    *,
    path: Path,
    separator: None | bytes,
    limit: None | int,
    chomp: bool,
    chunk_size: int,
) -> Iterator[bytes]:
    try:
        if str(path) == "-":
            return LineIterator(
                click.get_binary_stream("stdin"),
                separator,
                limit,
                chomp=chomp,
                chunk_size=chunk_size,
            )
        return each_line_in_path(
            path=path,
            separator=separator,
            limit=limit,
            chomp=chomp,
            chunk_size=chunk_size,
        )
    except ValidationError as e:
        # Use CLI-friendly message if available
        raise click.ClickException(e.cli_msg or str(e)) from e


@cli.command("split")
@click_add_options(CLICK_SPLIT_OPTIONS)
@click.option(
    "--chomp",
    is_flag=True,
    help="Drop the separator from each line.",
)
@click.option(
    "--null",
    "null_terminated",
    is_flag=True,
    help="Terminate each output line with NUL instead of its separator (implies --chomp).",
)
@click.option(
    "--repr",
    "repr_output",
    is_flag=True,
    help="Print the Python repr of each line, one per output line.",
)
def split_command(
    path: Path,
    separator: None | str,
    hex_separator: bool,
    no_separator: bool,
    limit: None | int,
    chunk_size: int,
    chomp: bool,
    null_terminated: bool,
    repr_output: bool,
):
    """Split PATH (or - for stdin) into lines and write them to stdout."""

    if null_terminated and repr_output:
        raise click.ClickException("--null and --repr are mutually exclusive.")

    lines = open_lines(
        path=path,
        separator=parse_separator(
            separator,
            hex_separator=hex_separator,
            no_separator=no_separator,
        ),
        limit=limit,
        chomp=chomp or null_terminated,
        chunk_size=chunk_size,
    )

    out = click.get_binary_stream("stdout")
    while True:
        # only read errors are reported against path, write errors propagate
        try:
            line = next(lines, None)
        except OSError as e:
            raise click.ClickException(f"Failed to read {path}: {e}") from e
        if line is None:
            break
        if repr_output:
            click.echo(repr(line))
        elif null_terminated:
            out.write(line + b"\x00")
        else:
            out.write(line)
    out.flush()


@cli.command("count")
@click_add_options(CLICK_SPLIT_OPTIONS)
def count_command(
    path: Path,
    separator: None | str,
    hex_separator: bool,
    no_separator: bool,
    limit: None | int,
    chunk_size: int,
):
    """Print the number of lines in PATH (or - for stdin)."""

    lines = open_lines(
        path=path,
        separator=parse_separator(
            separator,
            hex_separator=hex_separator,
            no_separator=no_separator,
        ),
        limit=limit,
        chomp=False,
        chunk_size=chunk_size,
    )
    try:
        count = sum(1 for _ in lines)
    except OSError as e:
        raise click.ClickException(f"Failed to read {path}: {e}") from e
    logger.debug("counted %d lines in %s", count, path)
    click.echo(count)


if __name__ == "__main__":
    cli.main(args=sys.argv[1:], standalone_mode=True)
