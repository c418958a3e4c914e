"""FastAPI dependencies: session identity and the shared CredentialService."""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import HTTPException, Request

from keyhub.config import KeyhubConfig
from keyhub.core.ownership import Identity
from keyhub.service import CredentialService
from server.auth.jwt_handler import decode_token

SESSION_COOKIE = "keyhub_session"

_DATA_DIR = Path(os.environ.get("KEYHUB_DATA_DIR", str(Path.home() / ".keyhub")))
_config = KeyhubConfig(
    db_path=_DATA_DIR / "keys.db",
    github_api_url=os.environ.get("KEYHUB_GITHUB_API_URL", "https://api.github.com"),
)
_service: CredentialService | None = None


def get_config() -> KeyhubConfig:
    return _config


def get_service() -> CredentialService:
    """Return (or lazily create) the process-wide CredentialService."""
    global _service
    if _service is None:
        _service = CredentialService(config=_config)
    return _service


def require_session(request: Request) -> Identity:
    """FastAPI dependency: require a human session. Returns the resolved Identity.

    Reads a session JWT from ``Authorization: Bearer`` or the session cookie.
    API keys are never accepted here.
    """
    token = ""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[7:]
    elif SESSION_COOKIE in request.cookies:
        token = request.cookies[SESSION_COOKIE]

    if not token:
        raise _unauthenticated()

    payload = decode_token(token)
    if not payload or payload.get("type") != "session" or not payload.get("sub"):
        raise _unauthenticated()
    return Identity(id=payload["sub"], email=payload.get("email"))


def _unauthenticated() -> HTTPException:
    return HTTPException(401, "Not authenticated", headers={"WWW-Authenticate": "Bearer"})
