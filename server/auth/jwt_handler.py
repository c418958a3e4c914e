"""Session token creation and validation.

Sign-in lives outside Keyhub; this module only needs to read the session
tokens it hands out. ``create_session_token`` exists for that collaborator
and for local development.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any

import jwt

log = logging.getLogger(__name__)

_DEFAULT_SECRET = "keyhub-dev-secret-change-in-production"
_SECRET = os.environ.get("KEYHUB_JWT_SECRET", _DEFAULT_SECRET)

if _SECRET == _DEFAULT_SECRET:
    log.warning(
        "KEYHUB_JWT_SECRET not set! Using insecure default. "
        "Set KEYHUB_JWT_SECRET env var for production."
    )

_ALGORITHM = "HS256"
_SESSION_TTL = 3600  # 1 hour


def create_session_token(user_id: str, email: str | None = None) -> tuple[str, int]:
    """Create a session JWT for *user_id*. Returns (token, expires_in)."""
    now = int(time.time())
    payload: dict[str, Any] = {
        "sub": user_id,
        "type": "session",
        "iat": now,
        "exp": now + _SESSION_TTL,
    }
    if email:
        payload["email"] = email
    token = jwt.encode(payload, _SECRET, algorithm=_ALGORITHM)
    return token, _SESSION_TTL


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and validate a JWT. Returns payload or None."""
    try:
        return jwt.decode(token, _SECRET, algorithms=[_ALGORITHM])
    except jwt.InvalidTokenError:
        return None
