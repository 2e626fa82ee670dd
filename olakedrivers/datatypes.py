"""Column data types and the mappings from database type names to them."""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


class DataType(str, enum.Enum):
    """Logical type of a column or document field."""

    INT64 = "integer"
    FLOAT64 = "number"
    STRING = "string"
    BOOL = "boolean"
    TIMESTAMP = "timestamp"
    ARRAY = "array"
    UNKNOWN = "unknown"


MYSQL_TYPES: Mapping[str, DataType] = MappingProxyType(
    {
        # integer types
        "tinyint": DataType.INT64,
        "smallint": DataType.INT64,
        "mediumint": DataType.INT64,
        "int": DataType.INT64,
        "integer": DataType.INT64,
        "bigint": DataType.INT64,
        # floating point types
        "float": DataType.FLOAT64,
        "double": DataType.FLOAT64,
        "real": DataType.FLOAT64,
        "decimal": DataType.FLOAT64,
        "numeric": DataType.FLOAT64,
        # string types
        "char": DataType.STRING,
        "varchar": DataType.STRING,
        "tinytext": DataType.STRING,
        "text": DataType.STRING,
        "mediumtext": DataType.STRING,
        "longtext": DataType.STRING,
        # binary types
        "binary": DataType.STRING,
        "varbinary": DataType.STRING,
        "tinyblob": DataType.STRING,
        "blob": DataType.STRING,
        "mediumblob": DataType.STRING,
        "longblob": DataType.STRING,
        # date and time types
        "date": DataType.TIMESTAMP,
        "time": DataType.TIMESTAMP,
        "datetime": DataType.TIMESTAMP,
        "timestamp": DataType.TIMESTAMP,
        "year": DataType.INT64,
        # json
        "json": DataType.STRING,
        # enum and set
        "enum": DataType.STRING,
        "set": DataType.STRING,
        # geometry types
        "geometry": DataType.STRING,
        "point": DataType.STRING,
        "linestring": DataType.STRING,
        "polygon": DataType.STRING,
        "multipoint": DataType.STRING,
        "multilinestring": DataType.STRING,
        "multipolygon": DataType.STRING,
        "geometrycollection": DataType.STRING,
    }
)

POSTGRES_TYPES: Mapping[str, DataType] = MappingProxyType(
    {
        "bigint": DataType.INT64,
        "tinyint": DataType.INT64,
        "integer": DataType.INT64,
        "smallint": DataType.INT64,
        "smallserial": DataType.INT64,
        "int": DataType.INT64,
        "int2": DataType.INT64,
        "int4": DataType.INT64,
        "serial": DataType.INT64,
        "serial2": DataType.INT64,
        "serial4": DataType.INT64,
        "serial8": DataType.INT64,
        "bigserial": DataType.INT64,
        # numbers
        "decimal": DataType.FLOAT64,
        "numeric": DataType.FLOAT64,
        "double precision": DataType.FLOAT64,
        "float": DataType.FLOAT64,
        "float4": DataType.FLOAT64,
        "float8": DataType.FLOAT64,
        "real": DataType.FLOAT64,
        # boolean
        "bool": DataType.BOOL,
        "boolean": DataType.BOOL,
        # strings
        "bit varying": DataType.STRING,
        "box": DataType.STRING,
        "bytea": DataType.STRING,
        "character": DataType.STRING,
        "char": DataType.STRING,
        "varbit": DataType.STRING,
        "bit": DataType.STRING,
        "bit(n)": DataType.STRING,
        "varying(n)": DataType.STRING,
        "cidr": DataType.STRING,
        "inet": DataType.STRING,
        "macaddr": DataType.STRING,
        "macaddr8": DataType.STRING,
        "character varying": DataType.STRING,
        "text": DataType.STRING,
        "varchar": DataType.STRING,
        "longvarchar": DataType.STRING,
        "circle": DataType.STRING,
        "hstore": DataType.STRING,
        "name": DataType.STRING,
        "uuid": DataType.STRING,
        "json": DataType.STRING,
        "jsonb": DataType.STRING,
        "line": DataType.STRING,
        "lseg": DataType.STRING,
        "money": DataType.STRING,
        "path": DataType.STRING,
        "pg_lsn": DataType.STRING,
        "point": DataType.STRING,
        "polygon": DataType.STRING,
        "tsquery": DataType.STRING,
        "tsvector": DataType.STRING,
        "xml": DataType.STRING,
        "enum": DataType.STRING,
        "tsrange": DataType.STRING,
        # date/time
        "time": DataType.TIMESTAMP,
        "timez": DataType.TIMESTAMP,
        "date": DataType.TIMESTAMP,
        "timestamp": DataType.TIMESTAMP,
        "timestampz": DataType.TIMESTAMP,
        "interval": DataType.INT64,
        "timestamp with time zone": DataType.TIMESTAMP,
        "timestamp without time zone": DataType.TIMESTAMP,
        # arrays
        "ARRAY": DataType.ARRAY,
        "array": DataType.ARRAY,
    }
)


def _lookup(table: Mapping[str, DataType], name: str, dialect: str) -> DataType:
    try:
        return table[name]
    except KeyError:
        logger.warning("unsupported %s type %r, defaulting to string", dialect, name)
        return DataType.STRING


def mysql_type(name: str) -> DataType:
    """Map a MySQL data type name to a DataType; unknown names become STRING."""
    return _lookup(MYSQL_TYPES, name, "MySQL")


def postgres_type(name: str) -> DataType:
    """Map a Postgres data type name to a DataType; unknown names become STRING."""
    return _lookup(POSTGRES_TYPES, name, "Postgres")