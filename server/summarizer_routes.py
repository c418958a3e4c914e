"""GitHub README summarizer, gated by an API key instead of a session."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException

from keyhub.service import CredentialService
from keyhub.summarizers import ExtractiveSummarizer, GitHubReadmeFetcher, Summarizer
from server.auth.dependencies import get_config, get_service
from server.models import SummarizeRequest, SummarizeResponse

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["summarizer"])

_fetcher = GitHubReadmeFetcher(
    base_url=get_config().github_api_url,
    timeout=get_config().http_timeout,
)
_summarizer: Summarizer = ExtractiveSummarizer()


@router.post("/github-summarizer", response_model=SummarizeResponse)
def github_summarizer(
    body: SummarizeRequest,
    x_api_key: str | None = Header(None),
    service: CredentialService = Depends(get_service),
):
    if not x_api_key:
        raise HTTPException(400, "API key is required")
    if not service.validate(x_api_key).valid:
        raise HTTPException(403, "Invalid or unauthorized API key")

    readme = _fetcher.fetch(body.repo_url)
    log.info("Summarizing README for %s (%d chars)", body.repo_url, len(readme))
    return SummarizeResponse(summary=_summarizer.summarize(readme))
