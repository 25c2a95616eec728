"""Request guard and cookie handling for session authentication."""

from __future__ import annotations

from typing import Callable

from flask import Response, g, request

from officer_service.sessions import SESSION_TTL, SessionStore

SESSION_COOKIE = "sessid"


def session_guard(store: SessionStore) -> Callable[[], Response | None]:
    """Build a ``before_request`` hook that admits only known sessions.

    The hook answers 401 with an empty body when the ``sessid`` cookie is
    missing, blank or unknown; otherwise it stores the session in
    ``flask.g.session`` and lets the request through.
    """

    def guard() -> Response | None:
        session_id = request.cookies.get(SESSION_COOKIE, "")
        session = store.get(session_id) if session_id else None
        if session is None:
            return Response(status=401)
        g.session = session
        return None

    return guard


def set_session_cookie(response: Response, session_id: str, secure: bool = False) -> Response:
    """Attach the session cookie for *session_id* to *response* and return it."""
    response.set_cookie(
        SESSION_COOKIE,
        session_id,
        max_age=int(SESSION_TTL.total_seconds()),
        path="/",
        secure=secure,
        httponly=True,
        samesite="Lax",
    )
    return response