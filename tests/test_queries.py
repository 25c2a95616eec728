import sqlite3

import pytest

from officer_service.models import CreateOfficerParams, Officer
from officer_service.queries import Queries

SCHEMA = """
CREATE TABLE officers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    title TEXT NOT NULL,
    linkedin TEXT,
    image_uri TEXT
)
"""


def make_connection():
    connection = sqlite3.connect(":memory:", isolation_level=None)
    connection.execute(SCHEMA)
    return connection


@pytest.fixture
def queries():
    connection = make_connection()
    yield Queries(connection)
    connection.close()


def test_create_returns_stored_row(queries):
    params = CreateOfficerParams(name="Ada", title="President", linkedin="in/ada")
    officer = queries.create_officer(params)
    assert (officer.name, officer.title, officer.linkedin, officer.image_uri) == (
        "Ada",
        "President",
        "in/ada",
        None,
    )
    assert queries.get_officer(officer.id) == officer


def test_list_orders_by_id(queries):
    created = [
        queries.create_officer(CreateOfficerParams(name=name, title="Member"))
        for name in ("Ada", "Grace", "Linus")
    ]
    listed = queries.list_officers()
    assert listed == created
    assert [o.id for o in listed] == sorted(o.id for o in listed)


def test_list_empty(queries):
    assert queries.list_officers() == []


def test_get_missing_raises(queries):
    with pytest.raises(LookupError):
        queries.get_officer(12345)


def test_delete_removes_row(queries):
    keep = queries.create_officer(CreateOfficerParams(name="Ada", title="President"))
    gone = queries.create_officer(CreateOfficerParams(name="Grace", title="Treasurer"))
    queries.delete_officer(gone.id)
    assert queries.list_officers() == [keep]
    with pytest.raises(LookupError):
        queries.get_officer(gone.id)


def test_delete_missing_is_silent(queries):
    queries.delete_officer(999)
    assert queries.list_officers() == []


def test_with_connection_uses_other_connection(queries):
    other = make_connection()
    try:
        bound = queries.with_connection(other)
        officer = bound.create_officer(CreateOfficerParams(name="Ada", title="President"))
        assert bound.list_officers() == [officer]
        assert queries.list_officers() == []
        assert bound.paramstyle == queries.paramstyle
    finally:
        other.close()


def test_numeric_paramstyle():
    connection = make_connection()
    try:
        numeric = Queries(connection, paramstyle="numeric")
        officer = numeric.create_officer(
            CreateOfficerParams(name="Ada", title="President", image_uri="img.png")
        )
        assert numeric.get_officer(officer.id) == Officer(
            officer.id, "Ada", "President", None, "img.png"
        )
    finally:
        connection.close()


def test_unsupported_paramstyle_rejected():
    with pytest.raises(ValueError, match="paramstyle"):
        Queries(None, paramstyle="pyformat")