"""Connection settings for the MySQL driver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote_plus

from olakedrivers.base import DEFAULT_RETRY_COUNT, DEFAULT_THREAD_COUNT, ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3306
DEFAULT_HOST = "localhost"
DEFAULT_DATABASE = "mysql"
DEFAULT_INITIAL_WAIT_TIME = 10
CDC_MARKER_KEY = "intial_wait_time"


def _escape(value: str) -> str:
    return quote_plus(value, safe="")


@dataclass
class MySQLConfig:
    """Settings read from the MySQL source configuration."""

    host: str = ""
    username: str = ""
    password: str = ""
    database: str = ""
    port: int = 0
    tls_skip_verify: bool = False
    update_method: Any = None
    default_mode: Optional[str] = None
    max_threads: int = 0
    retry_count: int = 0

    def uri(self) -> str:
        """Build the driver DSN, defaulting the port and host when unset."""
        if self.port == 0:
            self.port = DEFAULT_PORT
        host = self.host or DEFAULT_HOST
        return (
            f"{_escape(self.username)}:{_escape(self.password)}"
            f"@tcp({host}:{self.port})/{_escape(self.database)}"
        )

    def validate(self) -> None:
        """Check required fields and fill in defaults; raise ConfigError if invalid."""
        if not self.host:
            raise ConfigError("empty host name")
        if "http" in self.host:
            raise ConfigError(f"host should not contain http or https: {self.host}")
        if self.port <= 0 or self.port > 65535:
            raise ConfigError("invalid port number: must be between 1 and 65535")
        if not self.username:
            raise ConfigError("username is required")
        if not self.password:
            raise ConfigError("password is required")
        if not self.database:
            self.database = DEFAULT_DATABASE
        if self.max_threads <= 0:
            self.max_threads = DEFAULT_THREAD_COUNT
        if self.retry_count <= 0:
            self.retry_count = DEFAULT_RETRY_COUNT


@dataclass(frozen=True)
class CDCOptions:
    """Binlog change-capture settings."""

    initial_wait_time: int = DEFAULT_INITIAL_WAIT_TIME


def parse_cdc_options(update_method: Any) -> Optional[CDCOptions]:
    """Read CDC options from the update method; None when CDC is not configured."""
    if not isinstance(update_method, Mapping) or CDC_MARKER_KEY not in update_method:
        return None
    logger.info("Found CDC Configuration")
    wait = update_method[CDC_MARKER_KEY]
    if wait is None:
        wait = 0
    if isinstance(wait, bool) or not isinstance(wait, int):
        raise ConfigError(f"invalid {CDC_MARKER_KEY}: {wait!r}")
    return CDCOptions(initial_wait_time=wait or DEFAULT_INITIAL_WAIT_TIME)