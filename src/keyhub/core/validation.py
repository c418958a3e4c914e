"""Owner-blind API key validation."""

from __future__ import annotations

import logging

from keyhub.core.types import KeyValidation
from keyhub.exceptions import ValidationError
from keyhub.storage.base import CredentialStore

log = logging.getLogger(__name__)


class ValidationService:
    """Answers "is this bearer string a live key?" and nothing more.

    No identity is consulted and the matched record is never returned, so
    callers learn neither the owner nor any other field.
    """

    def __init__(self, store: CredentialStore):
        self._store = store

    def validate(self, token: str | None) -> KeyValidation:
        if not isinstance(token, str) or not token.strip():
            raise ValidationError("API key is required", field="token")
        # Stored tokens are trimmed on write, so compare trimmed.
        record = self._store.find_by_token(token.strip())
        log.debug("API key validation: valid=%s", record is not None)
        return KeyValidation(valid=record is not None)
