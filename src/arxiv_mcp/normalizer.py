"""Normalize feed entries into flat paper records."""

from __future__ import annotations

from arxiv_mcp.models import AuthorRecord, FeedEntry, PaperRecord


def format_authors(author: AuthorRecord | list[AuthorRecord] | None) -> str:
    """Flatten the entry's author field into one string.

    A list drops empty or missing names before joining. A single record is
    used as-is, so its name is not filtered; an empty name gives ``""``
    either way. See DESIGN.md for why the two paths stay separate.
    """
    if author is None:
        return ""
    if isinstance(author, list):
        return ", ".join(a.name for a in author if a.name)
    return author.name or ""


def normalize_entry(entry: FeedEntry) -> PaperRecord:
    return PaperRecord(
        title=entry.title or "",
        authors=format_authors(entry.author),
        summary=entry.summary or "",
        link=entry.id or "",
    )
