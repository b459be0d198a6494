"""Parse arXiv Atom feeds into intermediate entries."""

from __future__ import annotations

import logging
from typing import Optional
from xml.etree import ElementTree

from arxiv_mcp.models import AuthorRecord, Err, Feed, FeedEntry, Ok, ParseError, Result

logger = logging.getLogger(__name__)


def _local_name(tag) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tag names."""
    if not isinstance(tag, str):
        # comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(el: ElementTree.Element, name: str) -> list[ElementTree.Element]:
    return [child for child in el if _local_name(child.tag) == name]


def _child_text(el: ElementTree.Element, name: str) -> Optional[str]:
    """Stripped text of the first child called ``name``, None if there is none."""
    for child in _children(el, name):
        return "".join(child.itertext()).strip()
    return None


def _parse_author(el: ElementTree.Element) -> AuthorRecord:
    return AuthorRecord(name=_child_text(el, "name"))


def _parse_entry(el: ElementTree.Element) -> FeedEntry:
    authors = [_parse_author(a) for a in _children(el, "author")]
    # Keep the markup's arity: one <author> is a record, several are a list
    if not authors:
        author = None
    elif len(authors) == 1:
        author = authors[0]
    else:
        author = authors

    return FeedEntry(
        title=_child_text(el, "title") or "",
        summary=_child_text(el, "summary") or "",
        id=_child_text(el, "id") or "",
        author=author,
    )


def _total_results(root: ElementTree.Element) -> Optional[int]:
    raw = _child_text(root, "totalResults")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric totalResults: %r", raw)
        return None


def parse_feed(text: str) -> Result[Feed]:
    """Parse feed XML. A feed with no entries is a valid, empty result."""
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        logger.warning("Malformed feed XML: %s", e)
        return Err(ParseError(f"malformed XML ({e})"))

    if _local_name(root.tag) != "feed":
        logger.warning("Unexpected root element: %s", root.tag)
        return Err(ParseError(f"expected <feed> root element, got <{_local_name(root.tag)}>"))

    entries = [_parse_entry(el) for el in _children(root, "entry")]
    return Ok(Feed(entries=entries, total_results=_total_results(root)))
