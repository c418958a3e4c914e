"""Keyhub configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class KeyhubConfig(BaseModel):
    """Global configuration for a Keyhub instance."""

    db_path: Path = Field(
        default_factory=lambda: Path.home() / ".keyhub" / "keys.db",
    )
    token_bytes: int = Field(default=32, ge=32)  # 32 bytes = 256 bits
    default_kind: str = "default"
    github_api_url: str = "https://api.github.com"
    http_timeout: float = Field(default=10.0, gt=0)
