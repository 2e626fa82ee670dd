from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from olakedrivers.base import Chunk
from olakedrivers.mongo_chunks import (
    boundary_chunks,
    bucket_chunks,
    generate_pipeline,
    is_authorization_error,
    min_object_id,
    strip_object_id,
    timestamp_chunks,
)

MOMENT = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_pipeline_without_end():
    start = min_object_id(MOMENT)
    pipeline = generate_pipeline(start, None)
    conditions = pipeline[0]["$match"]["$and"]
    assert len(conditions) == 1
    assert conditions[0]["$and"][0] == {"_id": {"$type": 7}}
    assert conditions[0]["$and"][1] == {"_id": {"$gte": start}}
    assert pipeline[1] == {"$sort": {"_id": 1}}


def test_pipeline_with_end():
    start = min_object_id(MOMENT)
    end = min_object_id(MOMENT + timedelta(hours=1))
    conditions = generate_pipeline(start, end)[0]["$match"]["$and"]
    assert len(conditions) == 2
    assert conditions[1] == {"_id": {"$lt": end}}


def test_min_object_id_zero_tail():
    oid = min_object_id(MOMENT)
    assert oid.binary[4:] == bytes(8)
    assert oid.generation_time == MOMENT


def test_strip_object_id_round_trip():
    original = ObjectId()
    doc = {"_id": original, "x": 1}
    result = strip_object_id(doc)
    assert result is doc
    assert ObjectId(doc["_id"]) == original
    assert doc["x"] == 1


def test_strip_object_id_rejects_other_types():
    with pytest.raises(TypeError):
        strip_object_id({"_id": "plain"})


def test_strip_object_id_missing_key():
    with pytest.raises(KeyError):
        strip_object_id({"x": 1})


def test_boundary_chunks():
    a, b, c = (min_object_id(MOMENT + timedelta(days=i)) for i in range(3))
    assert boundary_chunks([a, b, c]) == [Chunk(a, b), Chunk(b, c), Chunk(c, None)]


def test_boundary_chunks_empty():
    assert boundary_chunks([]) == []


def test_bucket_chunks():
    a, b, c = (min_object_id(MOMENT + timedelta(days=i)) for i in range(3))
    buckets = [
        {"_id": {"min": a, "max": b}, "count": 5},
        {"_id": {"min": b, "max": c}, "count": 5},
    ]
    assert bucket_chunks(buckets) == [Chunk(a, b), Chunk(b, c), Chunk(c, None)]


def test_bucket_chunks_empty():
    assert bucket_chunks([]) == []


def test_timestamp_chunks_contiguous():
    last = MOMENT + timedelta(seconds=30)
    chunks = timestamp_chunks(MOMENT, last)
    assert chunks[0].min == min_object_id(MOMENT)
    assert chunks[-1] == Chunk(min_object_id(last), None)
    for current, following in zip(chunks, chunks[1:]):
        assert current.max == following.min


def test_timestamp_chunks_overshoot_clamped():
    last = MOMENT + timedelta(seconds=25)
    chunks = timestamp_chunks(MOMENT, last)
    assert chunks[-2].max == min_object_id(last + timedelta(seconds=1))
    assert chunks[-1] == Chunk(min_object_id(last), None)


def test_timestamp_chunks_equal_extremes():
    assert timestamp_chunks(MOMENT, MOMENT) == [Chunk(min_object_id(MOMENT), None)]


def test_authorization_errors():
    assert is_authorization_error("command splitVector: not authorized on db")
    assert is_authorization_error("CMD_NOT_ALLOWED: splitVector")
    assert not is_authorization_error("connection refused")