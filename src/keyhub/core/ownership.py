"""Ownership gate for owner-scoped key operations.

Every CRUD call carries an explicit identity. ``resolve_owner`` turns it into
an owner id and ``authorize`` checks a fetched record against that owner.
Both are pure functions; neither touches storage.
"""

from __future__ import annotations

from dataclasses import dataclass

from keyhub.core.types import Credential
from keyhub.exceptions import AuthenticationError, CredentialNotFound


@dataclass(frozen=True)
class Identity:
    """A resolved human identity, as handed over by the session layer."""

    id: str
    email: str | None = None


def resolve_owner(identity: Identity | str | None) -> str:
    """Return the owner id for *identity* or raise ``AuthenticationError``."""
    if identity is None:
        raise AuthenticationError("Not authenticated")
    owner_id = identity.id if isinstance(identity, Identity) else identity
    if not isinstance(owner_id, str) or not owner_id.strip():
        raise AuthenticationError("Not authenticated")
    return owner_id


def authorize(owner_id: str, credential_id: str, record: Credential | None) -> Credential:
    """Return *record* if *owner_id* owns it.

    Absent and foreign records raise the same ``CredentialNotFound``.
    """
    if record is None or record.owner_id != owner_id:
        raise CredentialNotFound(credential_id)
    return record
