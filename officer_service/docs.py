"""Swagger 2.0 description of the HTTP API."""

from __future__ import annotations

import copy
from typing import Any

TITLE = "Service Main API"
VERSION = "1.0"
DESCRIPTION = "CMAC's Go API"

_COOKIE_NOTE = (
    "Requires an authenticated `sessid` cookie; "
    "this cannot be set via Swagger Authorize."
)


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/handlers.{name}"}


def _response(description: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {"description": description, "schema": schema}


def _error_response(description: str) -> dict[str, Any]:
    return _response(description, _ref("errorResponse"))


def _body(description: str, definition: str) -> list[dict[str, Any]]:
    return [
        {
            "description": description,
            "name": "payload",
            "in": "body",
            "required": True,
            "schema": _ref(definition),
        }
    ]


_PATHS: dict[str, Any] = {
    "/auth/officers": {
        "post": {
            "description": f"Create a new officer record. {_COOKIE_NOTE}",
            "consumes": ["application/json"],
            "produces": ["application/json"],
            "tags": ["officers"],
            "summary": "Create officer",
            "parameters": _body("Officer payload", "createOfficerRequest"),
            "responses": {
                "201": _response("Created", _ref("officerResponse")),
                "400": _error_response("Bad Request"),
                "401": _error_response("Unauthorized"),
                "500": _error_response("Internal Server Error"),
            },
        }
    },
    "/auth/sessions": {
        "get": {
            "description": f"Returns all active sessions. {_COOKIE_NOTE}",
            "produces": ["application/json"],
            "tags": ["admin"],
            "summary": "List active sessions",
            "responses": {
                "200": _response(
                    "OK",
                    {"type": "object", "additionalProperties": {"type": "string"}},
                ),
                "401": _error_response("Unauthorized"),
            },
        }
    },
    "/officers": {
        "get": {
            "description": "Returns a list of every officer",
            "produces": ["application/json"],
            "tags": ["officers"],
            "summary": "List all officers",
            "responses": {
                "200": _response("OK", _ref("getOfficersResponse")),
                "500": _error_response("Internal Server Error"),
            },
        }
    },
    "/opme": {
        "post": {
            "description": (
                "Authenticate with the admin password and receive a session cookie"
            ),
            "consumes": ["application/json"],
            "produces": ["application/json"],
            "tags": ["admin"],
            "summary": "Admin login",
            "parameters": _body("Admin credentials", "AdminSessionRequest"),
            "responses": {
                "200": _response("OK", _ref("messageResponse")),
                "400": _error_response("Bad Request"),
                "401": _error_response("Unauthorized"),
                "500": _error_response("Internal Server Error"),
            },
        }
    },
}

_STRING = {"type": "string"}

_OFFICER_PROPERTIES = {
    "image_uri": _STRING,
    "linkedin": _STRING,
    "name": _STRING,
    "title": _STRING,
}

_DEFINITIONS: dict[str, Any] = {
    "handlers.AdminSessionRequest": {
        "type": "object",
        "required": ["password"],
        "properties": {"password": _STRING},
    },
    "handlers.createOfficerRequest": {
        "type": "object",
        "required": ["name", "title"],
        "properties": _OFFICER_PROPERTIES,
    },
    "handlers.errorResponse": {
        "type": "object",
        "properties": {"error": _STRING},
    },
    "handlers.getOfficersResponse": {
        "type": "object",
        "properties": {
            "officers": {"type": "array", "items": _ref("officerResponse")},
        },
    },
    "handlers.messageResponse": {
        "type": "object",
        "properties": {"message": _STRING},
    },
    "handlers.officerResponse": {
        "type": "object",
        "properties": {"id": {"type": "integer"}, **_OFFICER_PROPERTIES},
    },
}


def swagger_spec(host: str = "", base_path: str = "/") -> dict[str, Any]:
    """Return the Swagger 2.0 document for the API as a fresh dictionary."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": DESCRIPTION,
            "title": TITLE,
            "contact": {},
            "version": VERSION,
        },
        "host": host,
        "basePath": base_path,
        "paths": copy.deepcopy(_PATHS),
        "definitions": copy.deepcopy(_DEFINITIONS),
    }