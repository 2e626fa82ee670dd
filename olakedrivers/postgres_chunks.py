"""Chunk planning for Postgres backfills."""

from __future__ import annotations

import sys
from numbers import Real
from typing import Any, Callable, Optional

from olakedrivers.base import Chunk

MAX_PAGE = 0xFFFFFFFF
MAX_DISTRIBUTION_FACTOR = float(sys.maxsize)


def _ctid(page: int) -> str:
    return f"'({page},0)'"


def ctid_ranges(rel_pages: int, batch_size: int) -> list[Chunk]:
    """Split a table's pages into ctid ranges of `batch_size` pages.

    An empty table counts as one page; the last range ends at the largest page.
    """
    if batch_size <= 0:
        raise ValueError(f"batch size must be positive: {batch_size}")
    rel_pages = rel_pages or 1
    chunks = []
    for start in range(0, rel_pages, batch_size):
        end = start + batch_size
        if end >= rel_pages:
            end = MAX_PAGE
        chunks.append(Chunk(_ctid(start), _ctid(end)))
    return chunks


def _check_number(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"unsupported value for numeric chunking: {value!r}")


def split_by_step(minimum: Any, maximum: Any, step: Any) -> list[Chunk]:
    """Even chunks of width `step` from minimum up to maximum, then an open chunk."""
    _check_number(minimum)
    _check_number(maximum)
    _check_number(step)
    chunks = []
    start, end = minimum, minimum + step
    while end <= maximum:
        chunks.append(Chunk(start, end))
        start, end = end, end + step
    chunks.append(Chunk(start, None))
    return chunks


def split_by_next(minimum: Any, next_end: Callable[[Any], Optional[Any]]) -> list[Chunk]:
    """Chunks whose ends come from `next_end`, until it returns None or repeats."""
    chunks = []
    start = minimum
    while True:
        end = next_end(start)
        if end is None or end == start:
            break
        chunks.append(Chunk(start, end))
        start = end
    return chunks


def distribution_factor(minimum: Any, maximum: Any, approximate_rows: int) -> float:
    """How sparsely the key range is populated: (max - min + 1) / rows."""
    if approximate_rows == 0:
        return MAX_DISTRIBUTION_FACTOR
    _check_number(minimum)
    _check_number(maximum)
    return float(maximum - minimum + 1) / approximate_rows