"""README summarization behind a validated API key."""

from keyhub.summarizers.base import RepoSummary, Summarizer
from keyhub.summarizers.extractive import ExtractiveSummarizer
from keyhub.summarizers.github import GitHubReadmeFetcher, parse_repo

__all__ = [
    "ExtractiveSummarizer",
    "GitHubReadmeFetcher",
    "RepoSummary",
    "Summarizer",
    "parse_repo",
]
