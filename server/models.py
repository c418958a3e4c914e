"""Request/response models for the machine-facing REST surface."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from keyhub.summarizers.base import RepoSummary


class ValidateKeyRequest(BaseModel):
    token: str | None = Field(default=None, validation_alias=AliasChoices("token", "key"))


class SummarizeRequest(BaseModel):
    repo_url: str | None = Field(
        default=None, validation_alias=AliasChoices("repoUrl", "repo_url")
    )


class SummarizeResponse(BaseModel):
    summary: RepoSummary


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
