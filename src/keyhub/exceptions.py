"""Keyhub exceptions."""


class KeyhubError(Exception):
    """Base exception for all Keyhub errors."""


class ValidationError(KeyhubError):
    """Raised when caller input is malformed or missing."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(KeyhubError):
    """Raised when a record is absent or not owned by the caller."""


class CredentialNotFound(NotFoundError):
    """Raised when an API key id does not resolve for the requesting owner.

    The message never says whether the key exists under another owner.
    """

    def __init__(self, credential_id: str):
        self.credential_id = credential_id
        super().__init__("API key not found")


class ConflictError(KeyhubError):
    """Raised when a token is already held by another credential."""


class AuthenticationError(KeyhubError):
    """Raised when an owner-scoped operation has no resolved identity."""


class InfrastructureError(KeyhubError):
    """Raised on storage or entropy-source failures."""


class DuplicateToken(KeyhubError):
    """Raised by a store when inserting or updating to a token that already exists."""

    def __init__(self):
        super().__init__("Duplicate token")


class SummarizerError(KeyhubError):
    """Raised when a README cannot be fetched or summarized."""
