"""The search_arxiv pipeline and its error boundary.

Stages return ``Ok``/``Err`` values; this module threads them together and is
the single place where a failure becomes text. Nothing raised or returned by
a stage escapes ``search_arxiv``.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from arxiv_mcp.fetcher import fetch_feed
from arxiv_mcp.formatter import format_papers
from arxiv_mcp.models import (
    DEFAULT_MAX_RESULTS,
    Err,
    Ok,
    PaperRecord,
    Result,
    SearchRequest,
)
from arxiv_mcp.normalizer import normalize_entry
from arxiv_mcp.parser import parse_feed
from arxiv_mcp.query import build_query_url

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error during search: "
FALLBACK_MESSAGE = "Unknown error"


def report_error(error: BaseException) -> str:
    message = getattr(error, "message", "") or str(error) or FALLBACK_MESSAGE
    return f"{ERROR_PREFIX}{message}"


async def run_search(
    request: SearchRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Result[list[PaperRecord]]:
    """Fetch, parse and normalize one page of results."""
    url = build_query_url(request)

    fetched = await fetch_feed(url, client=client)
    if isinstance(fetched, Err):
        return fetched

    parsed = parse_feed(fetched.value)
    if isinstance(parsed, Err):
        return parsed

    feed = parsed.value
    logger.info(
        "cat:%s -> %d entries (total %s)",
        request.category, len(feed.entries), feed.total_results,
    )
    return Ok([normalize_entry(e) for e in feed.entries])


async def search_arxiv(
    category: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Search arXiv for the newest papers in ``category`` and return a digest.

    Always returns a string: the digest, the no-papers message, or
    ``"Error during search: ..."``.
    """
    try:
        request = SearchRequest(category=category, max_results=max_results)
        result = await run_search(request, client=client)
        if isinstance(result, Err):
            return report_error(result.error)
        return format_papers(result.value)
    except Exception as e:
        logger.exception("Unexpected failure searching cat:%s", category)
        return report_error(e)
