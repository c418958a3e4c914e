"""Storage backend protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from keyhub.core.types import Credential


@runtime_checkable
class CredentialStore(Protocol):
    """Minimal interface every credential store must implement.

    Each call is atomic for the single record it touches. Owner-scoped calls
    return ``None``/``False`` for records that are absent *or* foreign.
    """

    def insert(self, credential: Credential) -> Credential:
        """Persist *credential*, assigning its id. Raise ``DuplicateToken`` on clash."""
        ...

    def get(self, credential_id: str, owner_id: str) -> Credential | None:
        """Fetch one credential owned by *owner_id*."""
        ...

    def list_by_owner(self, owner_id: str) -> list[Credential]:
        """All credentials of *owner_id*, newest first."""
        ...

    def update(self, credential_id: str, owner_id: str, /, **fields: Any) -> Credential | None:
        """Partial update. Return the updated credential or ``None``."""
        ...

    def delete(self, credential_id: str, owner_id: str) -> bool:
        """Delete by id. Return ``True`` if a record owned by *owner_id* was removed."""
        ...

    def find_by_token(self, token: str) -> Credential | None:
        """Look a credential up by its token, regardless of owner."""
        ...
