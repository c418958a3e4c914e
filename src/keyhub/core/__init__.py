"""Core types and algorithms."""

from keyhub.core.types import Credential, KeyValidation

__all__ = ["Credential", "KeyValidation"]
