"""In-memory session store with expiry."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from officer_service.session_id import generate_session_id

SESSION_TTL = timedelta(minutes=30)
CLEANUP_INTERVAL = 5 * 60.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Session:
    """A logged-in user and the moment the session stops being valid."""

    user: str
    expiry: datetime


def new_session(user: str) -> Session:
    """Create a session for *user* that expires after the session TTL."""
    return Session(user=user, expiry=_utcnow() + SESSION_TTL)


def is_expired(expiry: datetime, now: datetime | None = None) -> bool:
    """Return True once *now* has reached *expiry*."""
    if now is None:
        now = _utcnow()
    return not now < expiry


class SessionStore:
    """Thread-safe mapping of session ids to sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def add(self, session: Session) -> str:
        """Store *session* under a fresh id and return the id."""
        session_id = generate_session_id()
        with self._lock:
            self._sessions[session_id] = session
        return session_id

    def get(self, session_id: str) -> Session | None:
        """Return the session stored under *session_id*, or None."""
        with self._lock:
            return self._sessions.get(session_id)

    def remove_expired(self) -> int:
        """Drop expired sessions and return how many were removed."""
        now = _utcnow()
        with self._lock:
            expired = [k for k, v in self._sessions.items() if is_expired(v.expiry, now)]
            for key in expired:
                del self._sessions[key]
        return len(expired)

    def run_cleanup(
        self,
        interval: float = CLEANUP_INTERVAL,
        stop_event: threading.Event | None = None,
    ) -> None:
        """Remove expired sessions every *interval* seconds until *stop_event* is set."""
        if stop_event is None:
            stop_event = threading.Event()
        while not stop_event.wait(interval):
            self.remove_expired()

    def display(self) -> dict[str, str]:
        """Return a textual description of every stored session, keyed by id."""
        with self._lock:
            return {k: f"{v!r}\n" for k, v in self._sessions.items()}