#!/usr/bin/env python3
# tab-width:4

"""
Public API function for iterating over the lines of a file by path.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .eachline import DEFAULT_CHUNK_SIZE
from .eachline import DEFAULT_SEPARATOR
from .eachline import LineIterator
from .eachline import validate_arguments


def each_line_in_path(
    *,
    path: Path | str | os.PathLike,
    separator: bytes | None = DEFAULT_SEPARATOR,
    limit: int | None = None,
    chomp: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[bytes]:
    """
    Open path for binary reading and yield its lines.

    Args:
        path: Path to the file
        separator: Line separator, None or b"" for no splitting
        limit: Maximum bytes per line (must be positive)
        chomp: Drop the matched separator from each line
        chunk_size: Bytes requested per read()

    Returns:
        Generator of lines. The file is closed when the generator is
        exhausted or closed.

    Raises:
        InvalidArgument: If limit or chunk_size is not positive (raised here, not on first next())
        TypeError: If an argument has the wrong type
        FileNotFoundError: On first next(), if path does not exist
    """
    validate_arguments(
        separator=separator,
        limit=limit,
        chunk_size=chunk_size,
        function_name="each_line_in_path",
    )
    return _each_line_in_path(
        path=Path(path),
        separator=separator,
        limit=limit,
        chomp=chomp,
        chunk_size=chunk_size,
    )


def _each_line_in_path(
    *,
    path: Path,
    separator: bytes | None,
    limit: int | None,
    chomp: bool,
    chunk_size: int,
) -> Iterator[bytes]:
    with open(path, "rb") as fh:
        yield from LineIterator(
            fh,
            separator,
            limit,
            chomp=chomp,
            chunk_size=chunk_size,
        )
