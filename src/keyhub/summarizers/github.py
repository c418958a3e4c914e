"""Fetch a repository README from the GitHub REST API."""

from __future__ import annotations

import logging
import re

import httpx

from keyhub.exceptions import SummarizerError, ValidationError

log = logging.getLogger(__name__)

_GITHUB_URL = re.compile(r"github\.com/([^/\s]+)/([^/\s#?]+)")


def parse_repo(value: str) -> tuple[str, str]:
    """Split ``https://github.com/owner/repo`` or ``owner/repo`` into its parts."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError('Missing "repoUrl" field.', field="repoUrl")
    value = value.strip()
    if "github.com" in value:
        m = _GITHUB_URL.search(value)
        if not m:
            raise ValidationError("Could not parse GitHub URL", field="repoUrl")
        owner, repo = m.groups()
    else:
        parts = value.split("/")
        if len(parts) != 2 or not all(parts):
            raise ValidationError('Invalid repo format. Expected "owner/repo"', field="repoUrl")
        owner, repo = parts
    return owner, re.sub(r"\.git$", "", repo)


class GitHubReadmeFetcher:
    """Downloads raw README content for a repository."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def fetch(self, repo: str) -> str:
        owner, name = parse_repo(repo)
        headers = {
            "Accept": "application/vnd.github.v3.raw",
            "User-Agent": "GitHub-Readme-Fetcher",
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.get(f"{self.base_url}/repos/{owner}/{name}/readme", headers=headers)
        except httpx.HTTPError as exc:
            log.warning("README fetch for %s/%s failed: %s", owner, name, exc)
            raise SummarizerError(f"Failed to fetch README: {exc}") from exc

        if resp.status_code == 404:
            raise SummarizerError("README.md not found in this repository")
        if resp.status_code >= 400:
            raise SummarizerError(f"GitHub API error: {resp.status_code}")
        return resp.text
