import pytest

from olakedrivers.base import Chunk
from olakedrivers.postgres_chunks import (
    MAX_PAGE,
    ctid_ranges,
    distribution_factor,
    split_by_next,
    split_by_step,
)


def test_ctid_empty_table_is_one_open_range():
    chunks = ctid_ranges(0, 100)
    assert chunks == [Chunk("'(0,0)'", f"'({MAX_PAGE},0)'")]


def test_ctid_ranges_are_contiguous():
    chunks = ctid_ranges(25, 10)
    assert len(chunks) == 3
    for left, right in zip(chunks, chunks[1:]):
        assert left.max == right.min
    assert chunks[-1].max == f"'({MAX_PAGE},0)'"


def test_ctid_exact_multiple_ends_open():
    chunks = ctid_ranges(20, 10)
    assert len(chunks) == 2
    assert chunks[-1].max == f"'({MAX_PAGE},0)'"


def test_ctid_rejects_bad_batch():
    with pytest.raises(ValueError):
        ctid_ranges(10, 0)


@pytest.mark.parametrize("minimum, maximum, step", [(0, 10, 3), (5, 5, 1), (1.5, 9.0, 2.5)])
def test_split_by_step_invariants(minimum, maximum, step):
    chunks = split_by_step(minimum, maximum, step)
    assert chunks[0].min == minimum
    assert chunks[-1].max is None
    for left, right in zip(chunks, chunks[1:]):
        assert left.max == right.min
    for chunk in chunks[:-1]:
        assert chunk.max - chunk.min == step
        assert chunk.max <= maximum


def test_split_by_step_rejects_strings():
    with pytest.raises(TypeError):
        split_by_step("a", "z", 1)


def test_split_by_next_stops_on_repeat():
    ends = {1: 5, 5: 9, 9: 9}
    assert split_by_next(1, ends.get) == [Chunk(1, 5), Chunk(5, 9)]


def test_split_by_next_stops_on_none():
    ends = {"a": "m"}
    assert split_by_next("a", ends.get) == [Chunk("a", "m")]


def test_split_by_next_empty_when_no_next():
    assert split_by_next(3, lambda _: None) == []


def test_distribution_factor_dense_range():
    assert distribution_factor(0, 99, 100) == 1.0


def test_distribution_factor_scales_with_range():
    assert distribution_factor(0, 199, 100) == 2 * distribution_factor(0, 99, 100)


def test_distribution_factor_zero_rows_is_huge():
    assert distribution_factor(0, 10, 0) > 1e18


def test_distribution_factor_rejects_non_numbers():
    with pytest.raises(TypeError):
        distribution_factor("a", "b", 10)