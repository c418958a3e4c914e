"""API key token generation."""

from __future__ import annotations

import secrets

from keyhub.exceptions import InfrastructureError, ValidationError

MIN_TOKEN_BYTES = 32


def generate_token(nbytes: int = MIN_TOKEN_BYTES) -> str:
    """Return a random hex token of ``2 * nbytes`` characters.

    >>> len(generate_token())
    64
    """
    if nbytes < MIN_TOKEN_BYTES:
        raise ValueError(f"Tokens need at least {MIN_TOKEN_BYTES} bytes of entropy, got {nbytes}")
    try:
        return secrets.token_hex(nbytes)
    except (OSError, NotImplementedError) as exc:
        raise InfrastructureError("Entropy source unavailable") from exc


def resolve_token(override: str | None = None, *, nbytes: int = MIN_TOKEN_BYTES) -> str:
    """Use *override* (stripped) when given, otherwise generate a fresh token."""
    if override is None:
        return generate_token(nbytes)
    if not isinstance(override, str):
        raise ValidationError("API key token must be a string", field="token")
    token = override.strip()
    if not token:
        raise ValidationError("API key token must not be empty", field="token")
    return token
