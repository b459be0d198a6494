"""Render paper records as the plain-text digest returned to the tool host."""

from __future__ import annotations

from collections.abc import Sequence

from arxiv_mcp.models import PaperRecord

NO_PAPERS_MESSAGE = "No papers found for the specified category."
SEPARATOR = "\n\n---\n\n"


def format_paper(paper: PaperRecord) -> str:
    return "\n".join([
        f"Title: {paper.title}",
        f"Authors: {paper.authors}",
        f"Summary: {paper.summary}",
        f"Link: {paper.link}",
    ])


def format_papers(papers: Sequence[PaperRecord]) -> str:
    if not papers:
        return NO_PAPERS_MESSAGE
    return SEPARATOR.join(format_paper(p) for p in papers)
