"""CredentialService: owner-scoped key CRUD plus owner-blind validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from keyhub.config import KeyhubConfig
from keyhub.core.ownership import Identity, authorize, resolve_owner
from keyhub.core.tokens import resolve_token
from keyhub.core.types import IMMUTABLE_FIELDS, MUTABLE_FIELDS, Credential, KeyValidation
from keyhub.core.validation import ValidationService
from keyhub.exceptions import (
    ConflictError,
    CredentialNotFound,
    DuplicateToken,
    ValidationError,
)
from keyhub.storage.base import CredentialStore
from keyhub.storage.sqlite_backend import SQLiteBackend

log = logging.getLogger(__name__)

_FIELD_ALIASES = {"usage": "usage_counter"}


class CredentialService:
    """Issue, manage and validate API keys.

    >>> svc = CredentialService()
    >>> key = svc.create("u1", "Dev Key")
    >>> svc.validate(key.token).valid
    True
    """

    def __init__(
        self,
        config: KeyhubConfig | None = None,
        *,
        store: CredentialStore | None = None,
        db_path: str | Path | None = None,
    ):
        self._config = config or KeyhubConfig()
        if db_path is not None:
            self._config = self._config.model_copy(update={"db_path": Path(db_path)})
        self._store = store if store is not None else SQLiteBackend(self._config.db_path)
        self._validator = ValidationService(self._store)

    # ------------------------------------------------------------------
    # Owner-scoped CRUD
    # ------------------------------------------------------------------

    def create(
        self,
        owner: Identity | str,
        display_name: str | None,
        token: str | None = None,
        kind: str | None = None,
        usage: int = 0,
    ) -> Credential:
        """Create a key for *owner*. A supplied *token* is used instead of a generated one."""
        owner_id = resolve_owner(owner)
        credential = Credential(
            token=resolve_token(token, nbytes=self._config.token_bytes),
            owner_id=owner_id,
            display_name=_clean_display_name(display_name),
            kind=self._config.default_kind if kind is None else _clean_kind(kind),
            usage_counter=_clean_usage(usage),
        )
        try:
            created = self._store.insert(credential)
        except DuplicateToken as exc:
            raise ConflictError("An API key with this token already exists") from exc
        log.info("Created API key %s for owner %s", created.id, owner_id)
        return created

    def list(self, owner: Identity | str) -> list[Credential]:
        """All keys owned by *owner*, newest first."""
        return self._store.list_by_owner(resolve_owner(owner))

    def get(self, owner: Identity | str, credential_id: str) -> Credential:
        owner_id = resolve_owner(owner)
        return authorize(owner_id, credential_id, self._store.get(credential_id, owner_id))

    def update(self, owner: Identity | str, credential_id: str, /, **fields: Any) -> Credential:
        """Partial update of a key's mutable fields.

        Replacing ``token`` is allowed and keeps the key's id and owner.
        """
        owner_id = resolve_owner(owner)
        patch = _clean_patch(fields)
        try:
            record = self._store.update(credential_id, owner_id, **patch)
        except DuplicateToken as exc:
            raise ConflictError("An API key with this token already exists") from exc
        record = authorize(owner_id, credential_id, record)
        if patch:
            log.info("Updated API key %s fields=%s", credential_id, sorted(patch))
        return record

    def delete(self, owner: Identity | str, credential_id: str) -> None:
        """Delete a key. Raises ``CredentialNotFound`` if nothing was removed."""
        owner_id = resolve_owner(owner)
        if not self._store.delete(credential_id, owner_id):
            raise CredentialNotFound(credential_id)
        log.info("Deleted API key %s for owner %s", credential_id, owner_id)

    # ------------------------------------------------------------------
    # Owner-blind validation
    # ------------------------------------------------------------------

    def validate(self, token: str | None) -> KeyValidation:
        """Check whether *token* belongs to any existing key."""
        return self._validator.validate(token)


# ------------------------------------------------------------------
# Input checks
# ------------------------------------------------------------------


def _clean_display_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("API key name is required", field="display_name")
    return value.strip()


def _clean_kind(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("API key kind must be a string", field="kind")
    return value


def _clean_usage(value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError("Usage must be an integer", field="usage")
    if value < 0:
        raise ValidationError("Usage must not be negative", field="usage")
    return value


def _clean_patch(fields: dict[str, Any]) -> dict[str, Any]:
    patch: dict[str, Any] = {}
    for key, val in fields.items():
        name = _FIELD_ALIASES.get(key, key)
        if name in IMMUTABLE_FIELDS:
            raise ValidationError(f"Field '{name}' cannot be changed", field=name)
        if name not in MUTABLE_FIELDS:
            raise ValidationError(f"Unknown field '{key}'", field=key)
        if name in patch:
            raise ValidationError(f"Field '{name}' given twice", field=name)
        if name == "display_name":
            patch[name] = _clean_display_name(val)
        elif name == "token":
            if val is None:
                raise ValidationError("API key token must not be empty", field="token")
            patch[name] = resolve_token(val)
        elif name == "kind":
            patch[name] = _clean_kind(val)
        else:
            patch[name] = _clean_usage(val)
    return patch
