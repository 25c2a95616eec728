"""Database connection set-up: retrying connect and schema bootstrap."""

from __future__ import annotations

import logging
import os
import time
from contextlib import closing, suppress
from datetime import timedelta
from typing import Any, Callable

from officer_service.env import env_duration
from officer_service.queries import Queries

log = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = timedelta(seconds=45)
DEFAULT_RETRY_INTERVAL = timedelta(seconds=2)

_PARAMSTYLE_ALIASES = {"pyformat": "format"}


class DatabaseError(Exception):
    """Raised when the database cannot be reached or prepared."""


def _seconds(value: timedelta | float) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


def ensure_schema(connection: Any, schema_sql: str) -> None:
    """Apply *schema_sql* on *connection* and commit."""
    try:
        with closing(connection.cursor()) as cursor:
            cursor.execute(schema_sql)
        connection.commit()
    except Exception as err:
        raise DatabaseError(f"unable to apply schema: {err}") from err


def open_connection(connect: Callable[[], Any]) -> Any:
    """Open a connection with *connect* and check that it answers."""
    try:
        connection = connect()
    except Exception as err:
        raise DatabaseError(f"unable to open connection: {err}") from err

    try:
        with closing(connection.cursor()) as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchall()
    except Exception as err:
        with suppress(Exception):
            connection.close()
        raise DatabaseError(f"unable to ping database: {err}") from err
    return connection


def connect_with_retry(
    connect: Callable[[], Any],
    timeout: timedelta | float,
    retry_interval: timedelta | float,
) -> Any:
    """Keep calling :func:`open_connection` until it succeeds or *timeout* passes.

    Durations are timedeltas or seconds.
    """
    timeout_s = _seconds(timeout)
    interval_s = _seconds(retry_interval)
    if timeout_s <= 0:
        raise ValueError("timeout must be greater than 0")
    if interval_s <= 0:
        raise ValueError("retry interval must be greater than 0")

    deadline = time.monotonic() + timeout_s
    while True:
        try:
            return open_connection(connect)
        except DatabaseError as err:
            last_error = err

        remaining = deadline - time.monotonic()
        if remaining <= interval_s:
            if remaining > 0:
                time.sleep(remaining)
            raise DatabaseError(
                f"unable to connect to database within {timeout}: {last_error}"
            ) from last_error
        time.sleep(interval_s)


def init_db(connect: Callable[[str], Any], schema_sql: str) -> Queries:
    """Connect using ``DATABASE_URL``, apply the schema and return queries.

    *connect* receives the connection string. If it carries a DB-API
    ``paramstyle`` attribute, the queries use that placeholder style.
    The caller closes ``queries.connection`` when done.
    """
    conn_string = os.environ.get("DATABASE_URL", "")
    if not conn_string:
        raise DatabaseError("DATABASE_URL environment variable is required")

    timeout = env_duration("DB_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
    retry_interval = env_duration("DB_CONNECT_RETRY_INTERVAL", DEFAULT_RETRY_INTERVAL)

    log.info(
        "connecting to database (timeout=%s, retry_interval=%s)", timeout, retry_interval
    )
    connection = connect_with_retry(lambda: connect(conn_string), timeout, retry_interval)

    try:
        ensure_schema(connection, schema_sql)
    except DatabaseError:
        with suppress(Exception):
            connection.close()
        raise
    log.info("database schema ensured")

    paramstyle = getattr(connect, "paramstyle", "qmark")
    paramstyle = _PARAMSTYLE_ALIASES.get(paramstyle, paramstyle)
    return Queries(connection, paramstyle=paramstyle)