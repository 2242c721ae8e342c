#!/usr/bin/env python3
# -*- coding: utf8 -*-
# tab-width:4

# pylint: disable=invalid-name                    # [C0103] single letter var names, name too descriptive(!)

from __future__ import annotations

import enum
import errno
import io
import logging
import os
from typing import Any
from typing import BinaryIO

from .validation import InvalidArgument

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_SEPARATOR",
    "IteratorState",
    "LineIterator",
    "each_line",
    "readlines",
    "stream_position",
    "validate_arguments",
]

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = b"\n"
FALLBACK_CHUNK_SIZE = 8192


def chunk_size_from_env(environ: dict[str, str] | None = None) -> int:
    if environ is None:
        environ = dict(os.environ)
    raw = environ.get("EACHLINE_CHUNK_SIZE")
    if raw is None:
        return FALLBACK_CHUNK_SIZE
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(
            "ignoring EACHLINE_CHUNK_SIZE=%r, using %d", raw, FALLBACK_CHUNK_SIZE
        )
        return FALLBACK_CHUNK_SIZE
    return value


DEFAULT_CHUNK_SIZE = chunk_size_from_env()


class IteratorState(enum.Enum):
    READY = "ready"
    READING = "reading"
    EMITTING = "emitting"
    EXHAUSTED = "exhausted"


def _check_positive_int(
    *,
    function_name: str,
    name: str,
    value: Any,
    flag: str,
) -> None:
    # bool is an int subclass, True would silently mean 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{function_name}() {name} must be of type int, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidArgument(
            f"{function_name}() {name} must be a positive integer, got {value}",
            cli_msg=f"{flag} must be a positive integer, got {value}",
        )


def validate_arguments(
    *,
    separator: Any,
    limit: Any,
    chunk_size: Any,
    function_name: str = "each_line",
) -> None:
    """
    Check everything that can be checked without touching the stream.

    Raises:
        TypeError: separator is not bytes/None, or limit/chunk_size is not an int
        InvalidArgument: limit or chunk_size is zero or negative
    """
    if separator is not None and not isinstance(separator, (bytes, bytearray)):
        raise TypeError(
            f"{function_name}() separator must be bytes or None, got {type(separator).__name__}"
        )
    if limit is not None:
        _check_positive_int(
            function_name=function_name,
            name="limit",
            value=limit,
            flag="--limit",
        )
    _check_positive_int(
        function_name=function_name,
        name="chunk_size",
        value=chunk_size,
        flag="--chunk-size",
    )


def stream_position(stream: Any) -> int | None:
    """Cursor offset of stream, or None if the stream can not report one."""
    seekable = getattr(stream, "seekable", None)
    if seekable is None or getattr(stream, "closed", False):
        return None
    if not seekable():
        return None
    return stream.tell()


class LineIterator:
    """
    Lazy, single-pass iterator over the lines of a readable binary stream.

    Each ``next()`` reads forward until one of:
        - the separator is found; the line ends with the separator
        - ``limit`` bytes were gathered; the line is exactly ``limit`` bytes,
          even if that cuts a multi-byte separator in two
        - the stream is exhausted; the line is whatever remains

    An empty stream yields nothing. The stream is never closed here.

    Parameters:
        stream (BinaryIO | bytes): Object with ``read(n) -> bytes``. Raw bytes are wrapped in ``io.BytesIO``.
        separator (bytes | None): Line separator (default: b'\\n'). ``None`` or b'' disables splitting.
        limit (int | None): Maximum bytes per line. Must be positive.
        chomp (bool): Drop the matched separator from each line.
        chunk_size (int): Bytes requested from the stream per ``read()``.

    Raises:
        TypeError: stream has no ``read()``, or an argument has the wrong type
        InvalidArgument: limit or chunk_size is zero or negative

    Note:
        - Read-ahead beyond the last produced line is kept in an internal buffer.
          ``close()`` seeks it back on seekable streams. On pipes it is lost;
          use chunk_size=1 when the cursor must be exact.
    """

    def __init__(
        self,
        stream: BinaryIO | bytes,
        separator: bytes | None = DEFAULT_SEPARATOR,
        limit: int | None = None,
        *,
        chomp: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        validate_arguments(
            separator=separator,
            limit=limit,
            chunk_size=chunk_size,
        )
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(stream)
        elif not callable(getattr(stream, "read", None)):
            raise TypeError(
                f"each_line() stream must have a read() method, got {type(stream).__name__}"
            )

        self.stream = stream
        self.separator = bytes(separator) if separator else None
        self.limit = limit
        self.chomp = chomp
        self.chunk_size = chunk_size
        self.lineno = 0
        self.state = IteratorState.READY

        self._buffer = bytearray()
        self._scan_from = 0
        self._eof = False
        self._produced = 0
        self._start = stream_position(stream)

        logger.debug(
            "each_line: separator=%r limit=%r chunk_size=%d start=%r",
            self.separator,
            self.limit,
            self.chunk_size,
            self._start,
        )

    @property
    def position(self) -> int:
        """Offset just past the last produced line (relative to 0 if the stream can't tell)."""
        return (self._start or 0) + self._produced

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} state={self.state.value} lineno={self.lineno} "
            f"separator={self.separator!r} limit={self.limit!r}>"
        )

    def __iter__(self) -> LineIterator:
        return self

    def __next__(self) -> bytes:
        if self.state is IteratorState.EXHAUSTED:
            raise StopIteration
        self.state = IteratorState.READING

        while True:
            found = self._find_line_end()
            if found is not None:
                end, matched = found
                break
            if self._eof:
                if not self._buffer:
                    self._exhaust()
                    raise StopIteration
                end, matched = len(self._buffer), False
                break
            self._fill()

        stop = end
        if self.chomp and matched:
            stop -= len(self.separator or b"")
        line = bytes(self._buffer[:stop])
        del self._buffer[:end]
        self._scan_from = 0
        self._produced += end
        self.lineno += 1
        self.state = IteratorState.EMITTING
        return line

    def _find_line_end(self) -> None | tuple[int, bool]:
        """(end offset, separator matched) for the next line in the buffer, or None if more bytes are needed."""
        buffer = self._buffer
        separator = self.separator
        if separator is not None:
            idx = buffer.find(separator, self._scan_from)
            if idx != -1:
                end = idx + len(separator)
                if self.limit is not None and end > self.limit:
                    return self.limit, False
                return end, True
            # a separator can straddle the next chunk boundary
            self._scan_from = max(0, len(buffer) - len(separator) + 1)

        if self.limit is not None and len(buffer) >= self.limit:
            return self.limit, False
        return None

    def _fill(self) -> None:
        chunk = self.stream.read(self.chunk_size)
        if chunk is None:
            # non-blocking raw stream with nothing available
            raise BlockingIOError(
                errno.EAGAIN, "each_line() stream returned None, no data available"
            )
        if isinstance(chunk, str):
            raise TypeError(
                "each_line() stream must be opened in binary mode, read() returned str"
            )
        if not chunk:
            logger.debug("each_line: end of stream after %d lines", self.lineno)
            self._eof = True
            return
        self._buffer += chunk

    def _exhaust(self) -> None:
        self.state = IteratorState.EXHAUSTED
        self._buffer.clear()

    def close(self) -> None:
        """
        Stop iterating and push unconsumed read-ahead back into the stream.

        After close() on a seekable stream the cursor sits right after the
        last produced line. Calling it again, or after exhaustion, does nothing.
        """
        if self.state is IteratorState.EXHAUSTED:
            return
        unread = len(self._buffer)
        if unread:
            current = stream_position(self.stream)
            if current is None:
                logger.debug(
                    "each_line: stream is not seekable, dropping %d read-ahead bytes",
                    unread,
                )
            else:
                self.stream.seek(current - unread)
                logger.debug(
                    "each_line: rewound %d read-ahead bytes to offset %d",
                    unread,
                    current - unread,
                )
        self._exhaust()

    def __enter__(self) -> LineIterator:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def each_line(
    stream: BinaryIO | bytes,
    separator: bytes | None = DEFAULT_SEPARATOR,
    limit: int | None = None,
    *,
    chomp: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> LineIterator:
    """
    Iterate over the lines of stream.

    Arguments are validated here, before any byte is read:

        >>> each_line(io.BytesIO(b"a\\nb"), limit=0)
        Traceback (most recent call last):
        ...
        eachline.validation.InvalidArgument: each_line() limit must be a positive integer, got 0

    Example:
        >>> list(each_line(io.BytesIO(b"one\\ntwo\\nthree")))
        [b'one\\n', b'two\\n', b'three']
        >>> list(each_line(io.BytesIO(b"abcdefg"), limit=3))
        [b'abc', b'def', b'g']
    """
    return LineIterator(
        stream,
        separator,
        limit,
        chomp=chomp,
        chunk_size=chunk_size,
    )


def readlines(
    stream: BinaryIO | bytes,
    separator: bytes | None = DEFAULT_SEPARATOR,
    limit: int | None = None,
    *,
    chomp: bool = False,
) -> list[bytes]:
    return list(each_line(stream, separator, limit, chomp=chomp))
