import sqlite3
from datetime import timedelta

import pytest

from officer_service.database import (
    DatabaseError,
    connect_with_retry,
    ensure_schema,
    init_db,
    open_connection,
)

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS officers ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL, "
    "title TEXT NOT NULL, linkedin TEXT, image_uri TEXT)"
)


def test_ensure_schema_creates_table():
    conn = sqlite3.connect(":memory:")
    ensure_schema(conn, SCHEMA)
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='officers'"
    ).fetchall()
    assert rows == [("officers",)]


def test_ensure_schema_wraps_errors():
    conn = sqlite3.connect(":memory:")
    with pytest.raises(DatabaseError, match="unable to apply schema"):
        ensure_schema(conn, "NOT VALID SQL")


def test_open_connection_returns_working_connection():
    conn = open_connection(lambda: sqlite3.connect(":memory:"))
    assert conn.execute("SELECT 2").fetchone() == (2,)


def test_open_connection_wraps_connect_failure():
    def connect():
        raise sqlite3.OperationalError("refused")

    with pytest.raises(DatabaseError, match="refused"):
        open_connection(connect)


def test_open_connection_ping_failure():
    closed = sqlite3.connect(":memory:")
    closed.close()
    with pytest.raises(DatabaseError, match="unable to ping database"):
        open_connection(lambda: closed)


def test_connect_with_retry_retries_until_success():
    attempts = []

    def connect():
        attempts.append(1)
        if len(attempts) < 3:
            raise sqlite3.OperationalError("not yet")
        return sqlite3.connect(":memory:")

    conn = connect_with_retry(connect, timedelta(seconds=5), timedelta(milliseconds=5))
    assert len(attempts) == 3
    assert conn.execute("SELECT 1").fetchone() == (1,)


def test_connect_with_retry_gives_up_after_timeout():
    def connect():
        raise sqlite3.OperationalError("down")

    with pytest.raises(DatabaseError, match="unable to connect to database within"):
        connect_with_retry(connect, timedelta(milliseconds=50), timedelta(milliseconds=10))


@pytest.mark.parametrize(
    "timeout, interval, message",
    [
        (timedelta(0), timedelta(seconds=1), "timeout must be greater than 0"),
        (timedelta(seconds=1), timedelta(0), "retry interval must be greater than 0"),
    ],
)
def test_connect_with_retry_rejects_non_positive(timeout, interval, message):
    with pytest.raises(ValueError, match=message):
        connect_with_retry(lambda: sqlite3.connect(":memory:"), timeout, interval)


def test_init_db_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(DatabaseError, match="DATABASE_URL"):
        init_db(sqlite3.connect, SCHEMA)


def test_init_db_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", ":memory:")
    monkeypatch.setenv("DB_CONNECT_TIMEOUT", "abc")
    with pytest.raises(ValueError, match="DB_CONNECT_TIMEOUT"):
        init_db(sqlite3.connect, SCHEMA)


def test_init_db_returns_queries(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", ":memory:")
    monkeypatch.delenv("DB_CONNECT_TIMEOUT", raising=False)
    monkeypatch.delenv("DB_CONNECT_RETRY_INTERVAL", raising=False)
    seen = []

    def connect(url):
        seen.append(url)
        return sqlite3.connect(url)

    queries = init_db(connect, SCHEMA)
    assert seen == [":memory:"]
    assert queries.paramstyle == "qmark"
    assert queries.list_officers() == []
    queries.connection.execute("INSERT INTO officers (name, title) VALUES ('Ada', 'Chair')")
    assert [o.name for o in queries.list_officers()] == ["Ada"]


def test_init_db_closes_connection_on_schema_failure(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", ":memory:")
    monkeypatch.delenv("DB_CONNECT_TIMEOUT", raising=False)
    monkeypatch.delenv("DB_CONNECT_RETRY_INTERVAL", raising=False)
    opened = []

    def connect(url):
        conn = sqlite3.connect(url)
        opened.append(conn)
        return conn

    with pytest.raises(DatabaseError, match="unable to apply schema"):
        init_db(connect, "NOT VALID SQL")
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")