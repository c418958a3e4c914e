"""Core Pydantic models for Keyhub."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

# Fields a caller may change after creation.
MUTABLE_FIELDS = frozenset({"display_name", "token", "kind", "usage_counter"})
IMMUTABLE_FIELDS = frozenset({"id", "owner_id", "created_at"})


class Credential(BaseModel):
    """A single API key record."""

    id: str | None = None
    token: str
    owner_id: str
    display_name: str
    kind: str = "default"
    usage_counter: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class KeyValidation(BaseModel):
    """Outcome of an owner-blind token check. Carries nothing but the boolean."""

    valid: bool
