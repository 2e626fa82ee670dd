"""Shared driver state, constants and helpers."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TypeVar

from olakedrivers.datatypes import DataType

logger = logging.getLogger(__name__)

T = TypeVar("T")

PARQUET_FILE_EXT = "parquet"
MONGO_PRIMARY_ID = "_id"
MONGO_PRIMARY_ID_PREFIX = 'ObjectID("'
MONGO_PRIMARY_ID_SUFFIX = '")'
OLAKE_ID = "_olake_id"
OLAKE_TIMESTAMP = "_olake_insert_time"
CDC_DELETED_AT = "_cdc_deleted_at"
OP_TYPE = "_op_type"

DEFAULT_RETRY_COUNT = 3
DEFAULT_THREAD_COUNT = 3

DEFAULT_COLUMNS: Mapping[str, DataType] = MappingProxyType(
    {
        CDC_DELETED_AT: DataType.TIMESTAMP,
        OLAKE_ID: DataType.STRING,
        OLAKE_TIMESTAMP: DataType.INT64,
    }
)


class ConfigError(ValueError):
    """Raised when a driver configuration is missing or invalid."""


@dataclass(frozen=True)
class Chunk:
    """A half-open range of a split column; None means unbounded."""

    min: Any = None
    max: Any = None


class Driver:
    """Common driver state: the cache of discovered streams and CDC support."""

    def __init__(self, cdc_support: bool = False, state: Any = None) -> None:
        self._streams: dict[str, Any] = {}
        self._lock = threading.Lock()
        self.cdc_support = cdc_support
        self.state = state

    def change_stream_supported(self) -> bool:
        return self.cdc_support

    def get_streams(self) -> list[Any]:
        """Return every cached stream."""
        with self._lock:
            return list(self._streams.values())

    def add_stream(self, stream: Any) -> None:
        """Cache a stream under its id, replacing any earlier one."""
        with self._lock:
            self._streams[stream.id] = stream

    def get_stream(self, stream_id: str) -> Optional[Any]:
        """Return the cached stream with this id, or None."""
        with self._lock:
            return self._streams.get(stream_id)


def retry_on_backoff(attempts: int, sleep: float, func: Callable[[], T]) -> Optional[T]:
    """Call func up to `attempts` times, doubling the pause between retries.

    The first failure is retried at once; later failures wait `sleep` seconds,
    then twice that, and so on. The last error is raised if every attempt fails.
    """
    last_error: Optional[BaseException] = None
    for attempt in range(attempts):
        try:
            return func()
        except Exception as exc:  # noqa: BLE001 - any failure is retried
            last_error = exc
            if attempt != 0:
                logger.info(
                    "retry attempt[%d], retrying after %.2f seconds due to err: %s",
                    attempt,
                    sleep,
                    exc,
                )
                time.sleep(sleep)
                sleep *= 2
    if last_error is not None:
        raise last_error
    return None


def op_type(kind: str) -> str:
    """Map a change kind to its single-letter operation code."""
    if kind == "delete":
        return "d"
    if kind == "update":
        return "u"
    return "c"