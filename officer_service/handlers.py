"""HTTP views for officers, sessions and admin login."""

from __future__ import annotations

from typing import Any, Callable

from flask import Response, current_app, jsonify, request

from officer_service.middleware import set_session_cookie
from officer_service.models import CreateOfficerParams, Officer
from officer_service.nulls import normalize_optional
from officer_service.queries import Queries
from officer_service.sessions import SessionStore, new_session


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _required_string(payload: dict, key: str) -> str:
    value = payload.get(key)
    if value is None or value == "":
        raise ValueError(f"{key} is required")
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _optional_string(payload: dict, key: str) -> str | None:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _json_object() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    return payload


def officer_to_dict(officer: Officer) -> dict[str, Any]:
    """Return the JSON representation of *officer*."""
    return {
        "id": officer.id,
        "name": officer.name,
        "title": officer.title,
        "linkedin": officer.linkedin,
        "image_uri": officer.image_uri,
    }


def create_officer_view(queries: Queries) -> Callable[[], tuple[Response, int]]:
    """Build the view that creates an officer from a JSON body."""

    def create_officer() -> tuple[Response, int]:
        try:
            payload = _json_object()
            name = _required_string(payload, "name")
            title = _required_string(payload, "title")
            linkedin = _optional_string(payload, "linkedin")
            image_uri = _optional_string(payload, "image_uri")
        except ValueError as err:
            return _error(str(err), 400)

        params = CreateOfficerParams(
            name=name.strip(),
            title=title.strip(),
            linkedin=normalize_optional(linkedin),
            image_uri=normalize_optional(image_uri),
        )
        try:
            officer = queries.create_officer(params)
        except Exception:
            return _error("Failed to create new officer", 500)
        return jsonify(officer_to_dict(officer)), 201

    return create_officer


def get_officers_view(queries: Queries) -> Callable[[], tuple[Response, int]]:
    """Build the view that lists every officer."""

    def get_officers() -> tuple[Response, int]:
        try:
            officers = queries.list_officers()
        except Exception as err:
            return _error(str(err), 500)
        return jsonify({"officers": [officer_to_dict(o) for o in officers]}), 200

    return get_officers


def display_sessions_view(store: SessionStore) -> Callable[[], tuple[Response, int]]:
    """Build the view that lists active sessions."""

    def display_sessions() -> tuple[Response, int]:
        return jsonify(store.display()), 200

    return display_sessions


def admin_login_view(store: SessionStore, password: str) -> Callable[[], tuple[Response, int]]:
    """Build the view that trades the admin phrase for a session cookie."""

    def admin_login() -> tuple[Response, int]:
        try:
            payload = _json_object()
            given = _required_string(payload, "password")
        except ValueError:
            return _error("bad request", 400)

        if given != password:
            return _error("stop trying please", 401)

        try:
            session_id = store.add(new_session("Admin"))
        except Exception as err:
            return _error(str(err), 500)

        response = jsonify({"message": "Success!"})
        secure = bool(current_app.config.get("SESSION_COOKIE_SECURE", False))
        set_session_cookie(response, session_id, secure)
        return response, 200

    return admin_login