"""Storage backends."""

from keyhub.storage.base import CredentialStore
from keyhub.storage.sqlite_backend import SQLiteBackend

__all__ = ["CredentialStore", "SQLiteBackend"]
