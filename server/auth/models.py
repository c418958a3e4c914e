"""Pydantic request models for API key management.

Field aliases accept the dashboard's original names (``name``, ``key``,
``type``) next to the canonical ones.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CreateApiKeyRequest(BaseModel):
    display_name: str | None = Field(
        default=None, validation_alias=AliasChoices("display_name", "name")
    )
    token: str | None = Field(default=None, validation_alias=AliasChoices("token", "key"))
    kind: str | None = Field(default=None, validation_alias=AliasChoices("kind", "type"))
    usage: int = 0


class UpdateApiKeyRequest(BaseModel):
    # Unknown and immutable fields are kept so the service can reject them by name.
    model_config = ConfigDict(extra="allow")

    display_name: str | None = Field(
        default=None, validation_alias=AliasChoices("display_name", "name")
    )
    token: str | None = Field(default=None, validation_alias=AliasChoices("token", "key"))
    kind: str | None = Field(default=None, validation_alias=AliasChoices("kind", "type"))
    usage: int | None = None
