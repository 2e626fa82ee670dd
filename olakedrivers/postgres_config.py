"""Connection settings for the Postgres driver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import quote_plus, urlencode

from olakedrivers.base import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10000
DEFAULT_MAX_THREADS = 2
DEFAULT_INITIAL_WAIT_TIME = 10
REPLICATION_MARKER_KEY = "replication_slot"


def quote_identifier(name: str) -> str:
    """Quote an SQL identifier; anything after a NUL character is dropped."""
    name = name.split("\x00", 1)[0]
    return '"' + name.replace('"', '""') + '"'


def quote_literal(value: str) -> str:
    """Quote an SQL string literal, using E'' syntax when it holds backslashes."""
    value = value.replace("'", "''")
    if "\\" in value:
        return " E'" + value.replace("\\", "\\\\") + "'"
    return "'" + value + "'"


def _escape(value: str) -> str:
    return quote_plus(value, safe="")


@dataclass
class SSLConfig:
    """TLS settings for the connection."""

    mode: str = ""
    server_ca: str = ""
    client_cert: str = ""
    client_key: str = ""


@dataclass
class PostgresConfig:
    """Settings read from the Postgres source configuration."""

    host: str = ""
    port: int = 0
    database: str = ""
    username: str = ""
    password: str = ""
    jdbc_url_params: dict[str, str] = field(default_factory=dict)
    ssl: Optional[SSLConfig] = None
    update_method: Any = None
    default_mode: Optional[str] = None
    batch_size: int = 0
    max_threads: int = 0
    connection: Optional[str] = None

    def validate(self) -> None:
        """Check fields, fill in defaults and build the connection URL."""
        if not self.host:
            raise ConfigError("empty host name")
        if "http" in self.host:
            raise ConfigError("host should not contain http or https")
        if self.port <= 0 or self.port > 65535:
            raise ConfigError("invalid port number: must be between 1 and 65535")
        if self.batch_size <= 0:
            self.batch_size = DEFAULT_BATCH_SIZE
        if self.max_threads <= 0:
            self.max_threads = DEFAULT_MAX_THREADS

        base = (
            f"postgres://{_escape(self.username)}:{_escape(self.password)}"
            f"@{self.host}:{self.port}/{_escape(self.database)}"
        )
        query: dict[str, str] = {}
        if self.jdbc_url_params:
            query["options"] = "".join(
                f"{quote_identifier(key)}={quote_literal(value)} "
                for key, value in self.jdbc_url_params.items()
            )
        if self.ssl is None:
            self.ssl = SSLConfig(mode="disable")
        extras = {
            "sslmode": self.ssl.mode,
            "sslrootcert": self.ssl.server_ca,
            "sslcert": self.ssl.client_cert,
            "sslkey": self.ssl.client_key,
        }
        query.update({key: value for key, value in extras.items() if value})

        encoded = urlencode(sorted(query.items()), quote_via=quote_plus, safe="")
        self.connection = f"{base}?{encoded}" if encoded else base


@dataclass(frozen=True)
class ReplicationOptions:
    """Logical replication settings for WAL capture."""

    replication_slot: str
    initial_wait_time: int = DEFAULT_INITIAL_WAIT_TIME


def parse_replication_options(update_method: Any) -> Optional[ReplicationOptions]:
    """Read replication options from the update method; None for standard sync."""
    if (
        not isinstance(update_method, Mapping)
        or REPLICATION_MARKER_KEY not in update_method
    ):
        logger.info("Standard Replication is selected")
        return None
    logger.info("Found CDC Configuration")
    slot = update_method[REPLICATION_MARKER_KEY]
    if not isinstance(slot, str):
        raise ConfigError(f"invalid {REPLICATION_MARKER_KEY}: {slot!r}")
    wait = update_method.get("intial_wait_time") or 0
    if isinstance(wait, bool) or not isinstance(wait, int):
        raise ConfigError(f"invalid intial_wait_time: {wait!r}")
    return ReplicationOptions(
        replication_slot=slot,
        initial_wait_time=wait or DEFAULT_INITIAL_WAIT_TIME,
    )