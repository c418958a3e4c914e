"""Summarizer protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class RepoSummary(BaseModel):
    summary: str
    cool_facts: list[str] = Field(default_factory=list)


@runtime_checkable
class Summarizer(Protocol):
    """Turns README text into a short summary."""

    def summarize(self, text: str) -> RepoSummary:
        ...
