"""Chunk planning and query pipelines for MongoDB backfills."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping, MutableMapping, Optional, Sequence

from bson import ObjectId

from olakedrivers.base import MONGO_PRIMARY_ID, Chunk

CDC_CURSOR_FIELD = "_data"
OBJECT_ID_BSON_TYPE = 7

_AUTHORIZATION_MARKERS = ("not authorized", "CMD_NOT_ALLOWED")


def generate_pipeline(start: Any, end: Optional[Any]) -> list[dict[str, Any]]:
    """Aggregation pipeline selecting ObjectId keys in [start, end), sorted by _id."""
    conditions: list[dict[str, Any]] = [
        {
            "$and": [
                {"_id": {"$type": OBJECT_ID_BSON_TYPE}},
                {"_id": {"$gte": start}},
            ]
        }
    ]
    if end is not None:
        conditions.append({"_id": {"$lt": end}})
    return [
        {"$match": {"$and": conditions}},
        {"$sort": {"_id": 1}},
    ]


def min_object_id(moment: datetime) -> ObjectId:
    """The smallest ObjectId whose timestamp is `moment` (remaining bytes zero)."""
    return ObjectId.from_datetime(moment)


def strip_object_id(doc: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Replace the document's ObjectId key with its hex string, in place."""
    value = doc[MONGO_PRIMARY_ID]
    if not isinstance(value, ObjectId):
        raise TypeError(f"{MONGO_PRIMARY_ID} is not an ObjectId: {value!r}")
    doc[MONGO_PRIMARY_ID] = str(value)
    return doc


def boundary_chunks(boundaries: Sequence[Any]) -> list[Chunk]:
    """Chunks between consecutive boundaries plus an open chunk after the last."""
    chunks = [Chunk(low, high) for low, high in zip(boundaries, boundaries[1:])]
    if boundaries:
        chunks.append(Chunk(boundaries[-1], None))
    return chunks


def bucket_chunks(buckets: Iterable[Mapping[str, Any]]) -> list[Chunk]:
    """Chunks from $bucketAuto results plus an open chunk after the last bucket."""
    chunks = [Chunk(bucket["_id"]["min"], bucket["_id"]["max"]) for bucket in buckets]
    if chunks:
        chunks.append(Chunk(chunks[-1].max, None))
    return chunks


def timestamp_chunks(first: datetime, last: datetime) -> list[Chunk]:
    """Split the time span [first, last] into ObjectId ranges.

    Every six hours of span widens each chunk by ten seconds; the final chunk
    starts at `last` and is unbounded.
    """
    hours = (last - first).total_seconds() / 3600 / 6
    if hours < 1:
        hours = 1
    density = int(hours) * timedelta(seconds=10)

    chunks: list[Chunk] = []
    start = first
    while start < last:
        end = start + density
        upper = end + timedelta(0) if end <= last else last + timedelta(seconds=1)
        chunks.append(Chunk(min_object_id(start), min_object_id(upper)))
        start = end
    chunks.append(Chunk(min_object_id(last), None))
    return chunks


def is_authorization_error(message: str) -> bool:
    """True when an error message says the splitVector command was not allowed."""
    return any(marker in message for marker in _AUTHORIZATION_MARKERS)