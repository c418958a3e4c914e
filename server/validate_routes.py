"""Owner-blind key validation route, for machine callers holding only a key."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Header

from keyhub.core.types import KeyValidation
from keyhub.service import CredentialService
from server.auth.dependencies import get_service
from server.models import ValidateKeyRequest

router = APIRouter(prefix="/api", tags=["validate"])


@router.post("/validate-key", response_model=KeyValidation)
def validate_key(
    body: ValidateKeyRequest | None = Body(None),
    x_api_key: str | None = Header(None),
    service: CredentialService = Depends(get_service),
):
    """Return ``{"valid": bool}``. No session is read on this route."""
    token = body.token if body is not None and body.token is not None else x_api_key
    return service.validate(token)
