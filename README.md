# olakedrivers

Building blocks for sync drivers that read MongoDB, MySQL and Postgres
tables in chunks: configuration checking, column type mapping and chunk
planning.

## Modules

### `olakedrivers.datatypes`

- `DataType`: enum of logical column types (`INT64`, `FLOAT64`, `STRING`,
  `BOOL`, `TIMESTAMP`, `ARRAY`, `UNKNOWN`).
- `mysql_type(name)` and `postgres_type(name)` map a database type name
  (for example `"varchar"` or `"double precision"`) to a `DataType`.
  Names not in the tables are logged as a warning and mapped to `STRING`.

### `olakedrivers.base`

- Field-name constants such as `OLAKE_ID`, `OLAKE_TIMESTAMP`,
  `CDC_DELETED_AT` and `OP_TYPE`, and `DEFAULT_COLUMNS`, the extra
  columns added to streams when change capture is on.
- `Chunk(min, max)`: a frozen, half-open key range; `None` means
  unbounded.
- `ConfigError`: a `ValueError` raised for invalid configuration.
- `Driver`: a thread-safe cache of streams keyed by their `id`
  attribute, with `add_stream`, `get_stream` (returns `None` when
  absent), `get_streams` and `change_stream_supported`.
- `retry_on_backoff(attempts, sleep, func)`: calls `func` up to
  `attempts` times. The first failure is retried at once; after that it
  waits `sleep` seconds, doubling the wait each time. If every attempt
  fails the last exception is raised.
- `op_type(kind)`: `"delete"` → `"d"`, `"update"` → `"u"`, anything
  else → `"c"`.

### `olakedrivers.mongo_config`

- `MongoConfig.uri()` builds a `mongodb://` or `mongodb+srv://` URI.
  It sets `max_threads` to 10 when it is 0, and when a replica set is
  given defaults `read_preference` to `secondaryPreferred`.
- `MongoConfig.normalize_retry_count()` turns `retry_count` into a
  number of attempts: negative values become 3, otherwise one is added.

### `olakedrivers.mongo_chunks`

- `generate_pipeline(start, end)`: aggregation pipeline matching
  ObjectId `_id` values in `[start, end)` (no upper bound when `end` is
  `None`), sorted by `_id`.
- `min_object_id(moment)`: the lowest ObjectId for a datetime.
- `strip_object_id(doc)`: replaces the document's `_id` ObjectId with
  its hex string, in place; raises `TypeError` if `_id` is not an
  ObjectId.
- `boundary_chunks(boundaries)`, `bucket_chunks(buckets)` and
  `timestamp_chunks(first, last)`: chunk plans from split-vector keys,
  `$bucketAuto` results or a time span. Each ends with an open chunk.
- `is_authorization_error(message)`: true when the message contains
  `"not authorized"` or `"CMD_NOT_ALLOWED"`.

### `olakedrivers.mysql_config`

- `MySQLConfig.validate()` raises `ConfigError` for an empty host, a
  host containing `http`, a port outside 1–65535, or a missing username
  or password. It defaults `database` to `mysql`, `max_threads` and
  `retry_count` to 3.
- `MySQLConfig.uri()` returns a `user:password@tcp(host:port)/database`
  DSN. The port defaults to 3306 and the host to `localhost`.
- `parse_cdc_options(update_method)` returns `CDCOptions` when the
  mapping has an `intial_wait_time` key (0 or `None` becomes 10), and
  `None` otherwise.

### `olakedrivers.postgres_config`

- `PostgresConfig.validate()` checks host and port as above. It defaults
  `batch_size` to 10000 and `max_threads` to 2, and `ssl` to
  `SSLConfig(mode="disable")`. It stores a `postgres://` URL in
  `connection`, with `jdbc_url_params` passed as the `options` query
  parameter and the SSL settings as `sslmode`, `sslrootcert`, `sslcert`
  and `sslkey`.
- `quote_identifier(name)` and `quote_literal(value)` quote SQL
  identifiers and string literals.
- `parse_replication_options(update_method)` returns
  `ReplicationOptions` when the mapping has a `replication_slot` key,
  and `None` otherwise.

### `olakedrivers.postgres_chunks`

- `ctid_ranges(rel_pages, batch_size)`: CTID page ranges. The last range
  ends at page `0xFFFFFFFF`.
- `split_by_step(minimum, maximum, step)`: even numeric chunks followed
  by an open chunk.
- `split_by_next(minimum, next_end)`: chunks whose ends come from a
  callable, until it returns `None` or the same value again.
- `distribution_factor(minimum, maximum, approximate_rows)`: returns
  `(max - min + 1) / rows`, or `sys.maxsize` when there are no rows.

## What it does not do

The package opens no database connections and runs no queries. It does
not discover tables or collections, read change streams, binlogs or WAL,
or write records anywhere. It has no command-line program. Those parts
belong to the driver that uses these helpers.

## Install

```
pip install olakedrivers
```

## Example

```python
from olakedrivers.mongo_config import MongoConfig
from olakedrivers.postgres_chunks import split_by_step

config = MongoConfig(hosts=["localhost:27017"], username="user", database="shop")
print(config.uri())  # mongodb://user@localhost:27017/?authSource=

for chunk in split_by_step(1, 35, 10):
    print(chunk.min, chunk.max)  # 1 11, 11 21, 21 31, 31 None
```

## Tests

```
pip install -e ".[test]"
pytest
```