"""Officer queries over a DB-API connection."""

from __future__ import annotations

import dataclasses
from contextlib import closing
from dataclasses import dataclass
from typing import Any

from officer_service.models import CreateOfficerParams, Officer

_COLUMNS = "id, name, title, linkedin, image_uri"

_CREATE_OFFICER = (
    "INSERT INTO officers (name, title, linkedin, image_uri) "
    "VALUES ({0}, {1}, {2}, {3}) "
    f"RETURNING {_COLUMNS}"
)
_DELETE_OFFICER = "DELETE FROM officers WHERE id = {0}"
_GET_OFFICER = f"SELECT {_COLUMNS} FROM officers WHERE id = {{0}}"
_LIST_OFFICERS = f"SELECT {_COLUMNS} FROM officers ORDER BY id"

_PARAMSTYLES = ("qmark", "format", "numeric")


def _placeholders(paramstyle: str, count: int) -> list[str]:
    if paramstyle == "qmark":
        return ["?"] * count
    if paramstyle == "format":
        return ["%s"] * count
    return [f":{n}" for n in range(1, count + 1)]


@dataclass(frozen=True)
class Queries:
    """Typed queries against the ``officers`` table.

    *paramstyle* names the placeholder style of the driver behind
    *connection*: ``qmark``, ``format`` or ``numeric``.
    """

    connection: Any
    paramstyle: str = "qmark"

    def __post_init__(self) -> None:
        if self.paramstyle not in _PARAMSTYLES:
            raise ValueError(f"unsupported paramstyle {self.paramstyle!r}")

    def _sql(self, template: str, count: int) -> str:
        return template.format(*_placeholders(self.paramstyle, count))

    def _fetch_one(self, sql: str, args: tuple) -> Officer:
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(sql, args)
            row = cursor.fetchone()
        if row is None:
            raise LookupError("no rows in result set")
        return Officer(*row)

    def with_connection(self, connection: Any) -> Queries:
        """Return the same queries bound to *connection*, e.g. a transaction."""
        return dataclasses.replace(self, connection=connection)

    def create_officer(self, params: CreateOfficerParams) -> Officer:
        """Insert an officer and return the stored row."""
        return self._fetch_one(
            self._sql(_CREATE_OFFICER, 4),
            (params.name, params.title, params.linkedin, params.image_uri),
        )

    def delete_officer(self, officer_id: int) -> None:
        """Delete the officer with *officer_id*, if any."""
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(self._sql(_DELETE_OFFICER, 1), (officer_id,))

    def get_officer(self, officer_id: int) -> Officer:
        """Return the officer with *officer_id*; raise LookupError if absent."""
        return self._fetch_one(self._sql(_GET_OFFICER, 1), (officer_id,))

    def list_officers(self) -> list[Officer]:
        """Return every officer ordered by id."""
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(_LIST_OFFICERS)
            return [Officer(*row) for row in cursor.fetchall()]