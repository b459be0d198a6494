"""Fetch the raw Atom feed from the arXiv API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from arxiv_mcp.config import get_timeout
from arxiv_mcp.models import ApiError, Err, NetworkError, Ok, Result

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "arxiv-mcp/1.0",
    "Accept": "application/xml",
}


async def fetch_feed(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Result[str]:
    """GET ``url`` once and return the body text.

    Failures come back as ``Err``: ``NetworkError`` when no response was
    obtained, ``ApiError`` for a non-2xx status. No retries.
    """
    logger.debug("GET %s", url)
    try:
        if client is not None:
            response = await client.get(url, headers=HEADERS, follow_redirects=True)
        else:
            kwargs = {}
            timeout = get_timeout()
            if timeout is not None:
                kwargs["timeout"] = timeout
            async with httpx.AsyncClient(**kwargs) as owned:
                response = await owned.get(url, headers=HEADERS, follow_redirects=True)
    except httpx.HTTPError as e:
        logger.warning("arXiv request failed: %s", e)
        return Err(NetworkError(str(e)))

    if not response.is_success:
        logger.warning("arXiv API returned HTTP %d for %s", response.status_code, url)
        return Err(ApiError(response.status_code))

    logger.debug("Received %d bytes", len(response.content))
    return Ok(response.text)
