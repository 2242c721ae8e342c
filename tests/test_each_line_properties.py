#!/usr/bin/env python3
"""
Property tests for each_line() against a reference splitter.
"""

from __future__ import annotations

import io

from hypothesis import given
from hypothesis import settings
from hypothesis import strategies as st

from eachline import each_line

data_strategy = st.binary(max_size=300) | st.lists(
    st.sampled_from([b"a", b"b", b"\n", b"\r", b"\r\n", b"##"]), max_size=80
).map(b"".join)
separator_strategy = st.sampled_from([b"\n", b"\r\n", b"#", b"##", b"abc"]) | st.binary(
    min_size=1, max_size=4
)
limit_strategy = st.none() | st.integers(min_value=1, max_value=20)
chunk_size_strategy = st.integers(min_value=1, max_value=64)


def reference_split(data: bytes, separator: bytes, limit: int | None) -> list[bytes]:
    """Straightforward split with the same cut rules, no buffering."""
    lines = []
    start = 0
    while start < len(data):
        idx = data.find(separator, start)
        end = len(data) if idx == -1 else idx + len(separator)
        if limit is not None and end - start > limit:
            end = start + limit
        lines.append(data[start:end])
        start = end
    return lines


@settings(max_examples=500, deadline=None)
@given(
    data=data_strategy,
    separator=separator_strategy,
    limit=limit_strategy,
    chunk_size=chunk_size_strategy,
)
def test_matches_reference(data, separator, limit, chunk_size):
    actual = list(each_line(io.BytesIO(data), separator, limit, chunk_size=chunk_size))
    assert actual == reference_split(data, separator, limit)


@settings(max_examples=300, deadline=None)
@given(data=data_strategy, chunk_size=chunk_size_strategy)
def test_default_separator_reconstructs_stream(data, chunk_size):
    lines = list(each_line(io.BytesIO(data), chunk_size=chunk_size))
    assert b"".join(lines) == data
    assert all(len(line) > 0 for line in lines)
    assert all(line.endswith(b"\n") for line in lines[:-1])


@settings(max_examples=300, deadline=None)
@given(
    data=data_strategy,
    separator=separator_strategy | st.none(),
    limit=st.integers(min_value=1, max_value=20),
)
def test_lines_never_exceed_limit(data, separator, limit):
    lines = list(each_line(io.BytesIO(data), separator, limit))
    assert b"".join(lines) == data
    assert all(len(line) <= limit for line in lines)


@settings(max_examples=200, deadline=None)
@given(
    record=st.binary(min_size=1, max_size=200).filter(lambda b: b"\n" not in b),
    limit=st.integers(min_value=1, max_value=50),
)
def test_record_longer_than_limit_yields_full_chunks_then_tail(record, limit):
    lines = list(each_line(io.BytesIO(record), limit=limit))
    assert all(len(line) == limit for line in lines[:-1])
    assert 0 < len(lines[-1]) <= limit
    assert len(lines) == -(-len(record) // limit)


@settings(max_examples=200, deadline=None)
@given(data=data_strategy, limit=limit_strategy)
def test_chomp_removes_only_matched_separator(data, limit):
    plain = list(each_line(io.BytesIO(data), b"\n", limit))
    chomped = list(each_line(io.BytesIO(data), b"\n", limit, chomp=True))
    assert len(plain) == len(chomped)
    for line, chomped_line in zip(plain, chomped):
        if line.endswith(b"\n"):
            assert chomped_line == line[:-1]
        else:
            assert chomped_line == line
