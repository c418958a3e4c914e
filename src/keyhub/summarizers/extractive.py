"""Extractive README summarizer (no model, no network)."""

from __future__ import annotations

import re

from keyhub.summarizers.base import RepoSummary

_HEADING = re.compile(r"^#{1,6}\s+(.+?)\s*#*$")
_BULLET = re.compile(r"^[-*+]\s+(.+)$")
_NOISE = re.compile(r"^(\[!\[|!\[|<|\||---|===)")


class ExtractiveSummarizer:
    """First prose paragraph becomes the summary; bullet points (or headings) the facts."""

    def __init__(self, max_facts: int = 3, max_chars: int = 500):
        self.max_facts = max_facts
        self.max_chars = max_chars

    def summarize(self, text: str) -> RepoSummary:
        paragraphs: list[str] = []
        headings: list[str] = []
        bullets: list[str] = []
        current: list[str] = []
        in_code = False

        def flush() -> None:
            if current:
                paragraphs.append(" ".join(current))
                current.clear()

        for raw in text.splitlines():
            line = raw.strip()
            if line.startswith("```"):
                in_code = not in_code
                flush()
                continue
            if in_code:
                continue
            heading = _HEADING.match(line)
            bullet = _BULLET.match(line)
            if heading:
                headings.append(heading.group(1))
            elif bullet:
                bullets.append(bullet.group(1))
            if not line or heading or bullet or _NOISE.match(line):
                flush()
                continue
            current.append(line)
        flush()

        if paragraphs:
            summary = paragraphs[0]
        elif headings:
            summary = headings[0]
        else:
            summary = ""
        if len(summary) > self.max_chars:
            summary = summary[: self.max_chars - 3].rstrip() + "..."

        facts = bullets or headings[1:]
        return RepoSummary(summary=summary, cool_facts=facts[: self.max_facts])
