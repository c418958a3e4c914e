"""API key management routes (session required)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from keyhub.core.ownership import Identity
from keyhub.core.types import Credential
from keyhub.service import CredentialService
from server.auth.dependencies import get_service, require_session
from server.auth.models import CreateApiKeyRequest, UpdateApiKeyRequest

router = APIRouter(prefix="/api/keys", tags=["keys"])


@router.get("", response_model=list[Credential])
def list_keys(
    user: Identity = Depends(require_session),
    service: CredentialService = Depends(get_service),
):
    return service.list(user)


@router.post("", response_model=Credential, status_code=201)
def create_key(
    body: CreateApiKeyRequest,
    user: Identity = Depends(require_session),
    service: CredentialService = Depends(get_service),
):
    return service.create(
        user,
        body.display_name,
        token=body.token,
        kind=body.kind,
        usage=body.usage,
    )


@router.get("/{key_id}", response_model=Credential)
def get_key(
    key_id: str,
    user: Identity = Depends(require_session),
    service: CredentialService = Depends(get_service),
):
    return service.get(user, key_id)


@router.patch("/{key_id}", response_model=Credential)
@router.put("/{key_id}", response_model=Credential)
def update_key(
    key_id: str,
    body: UpdateApiKeyRequest,
    user: Identity = Depends(require_session),
    service: CredentialService = Depends(get_service),
):
    fields = body.model_dump(exclude_unset=True)
    fields.update(body.model_extra or {})
    return service.update(user, key_id, **fields)


@router.delete("/{key_id}", status_code=204)
def delete_key(
    key_id: str,
    user: Identity = Depends(require_session),
    service: CredentialService = Depends(get_service),
):
    service.delete(user, key_id)
    return Response(status_code=204)
