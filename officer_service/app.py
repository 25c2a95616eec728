"""Flask application and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import os
import sqlite3
import threading
from pathlib import Path

from flask import Blueprint, Flask, abort, jsonify

from officer_service.database import DatabaseError, init_db
from officer_service.docs import swagger_spec
from officer_service.env import load_dotenv
from officer_service.handlers import (
    admin_login_view,
    create_officer_view,
    display_sessions_view,
    get_officers_view,
)
from officer_service.middleware import session_guard
from officer_service.queries import Queries
from officer_service.sessions import SessionStore

log = logging.getLogger(__name__)

DEFAULT_PORT = 8080


def create_app(queries: Queries, store: SessionStore, admin_phrase: str) -> Flask:
    """Build the application with its public, admin and guarded routes."""
    app = Flask(__name__)
    app.config.setdefault("SESSION_COOKIE_SECURE", False)

    @app.get("/swagger/<path:resource>")
    def swagger(resource: str):
        if resource != "doc.json":
            abort(404)
        return jsonify(swagger_spec("", "/"))

    authed = Blueprint("auth", __name__, url_prefix="/auth")
    authed.before_request(session_guard(store))
    authed.add_url_rule(
        "/officers", "create_officer", create_officer_view(queries), methods=["POST"]
    )
    authed.add_url_rule(
        "/sessions", "display_sessions", display_sessions_view(store), methods=["GET"]
    )
    app.register_blueprint(authed)

    app.add_url_rule(
        "/officers", "get_officers", get_officers_view(queries), methods=["GET"]
    )
    app.add_url_rule(
        "/opme", "admin_login", admin_login_view(store, admin_phrase), methods=["POST"]
    )
    return app


class _ScriptCursor(sqlite3.Cursor):
    """Cursor that runs parameterless multi-statement SQL as a script."""

    def execute(self, sql, parameters=()):  # type: ignore[override]
        statements = [part for part in sql.split(";") if part.strip()]
        if not parameters and len(statements) > 1:
            return self.executescript(sql)
        return super().execute(sql, parameters)


class _ScriptConnection(sqlite3.Connection):
    def cursor(self, factory=_ScriptCursor):  # type: ignore[override]
        return super().cursor(factory)


def _sqlite_connect(conn_string: str) -> sqlite3.Connection:
    path = conn_string.removeprefix("sqlite://")
    if conn_string.startswith("sqlite:///"):
        path = conn_string[len("sqlite:///"):]
    return sqlite3.connect(path, factory=_ScriptConnection, check_same_thread=False)


_sqlite_connect.paramstyle = "qmark"  # type: ignore[attr-defined]


def main(argv: list[str] | None = None) -> None:
    """Load settings, connect to the database and serve the API."""
    parser = argparse.ArgumentParser(description="Serve the officer API.")
    parser.add_argument("--schema", default="schema.sql", help="SQL schema file")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        load_dotenv(".env")
    except (OSError, ValueError) as err:
        raise SystemExit(f"Failed to load .env: {err}") from err

    try:
        schema_sql = Path(args.schema).read_text(encoding="utf-8")
    except OSError as err:
        raise SystemExit(f"unable to read schema {args.schema}: {err}") from err

    try:
        queries = init_db(_sqlite_connect, schema_sql)
    except (DatabaseError, ValueError) as err:
        raise SystemExit(str(err)) from err

    try:
        admin_phrase = os.environ.get("ADMIN_PHRASE")
        if admin_phrase is None:
            raise SystemExit("ADMIN_PHRASE is not set")

        store = SessionStore()
        threading.Thread(target=store.run_cleanup, daemon=True).start()

        app = create_app(queries, store, admin_phrase)
        app.config["SESSION_COOKIE_SECURE"] = os.environ.get("APP_MODE") == "release"
        app.run(host="0.0.0.0", port=args.port)
    finally:
        try:
            queries.connection.close()
        except Exception as err:
            log.warning("error closing database connection: %s", err)