"""Keyhub: issue, manage and validate API keys."""

from keyhub.config import KeyhubConfig
from keyhub.core.ownership import Identity
from keyhub.core.types import Credential, KeyValidation
from keyhub.service import CredentialService

__version__ = "0.1.0"
__all__ = ["CredentialService", "Credential", "Identity", "KeyValidation", "KeyhubConfig"]
