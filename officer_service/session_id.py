"""Random, URL-safe session identifiers."""

from __future__ import annotations

import secrets

DEFAULT_SESSION_ID_BYTES = 32


def generate_session_id(size: int = DEFAULT_SESSION_ID_BYTES) -> str:
    """Return an unpadded URL-safe base64 string of *size* random bytes."""
    if size <= 0:
        raise ValueError("size must be greater than 0")
    return secrets.token_urlsafe(size)