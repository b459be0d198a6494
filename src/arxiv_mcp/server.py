"""MCP server exposing the search_arxiv tool."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from arxiv_mcp import config
from arxiv_mcp.models import DEFAULT_MAX_RESULTS, MAX_RESULTS, MIN_RESULTS
from arxiv_mcp.service import search_arxiv

logger = logging.getLogger(__name__)

SERVER_NAME = "arxiv-mcp"

TOOL_DESCRIPTION = (
    "Search arXiv for the most recently submitted papers in a category "
    "(e.g. cs.AI, math.CO, q-bio.NC). Returns title, authors, summary and "
    "link for each paper."
)


def create_server(
    *,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> FastMCP:
    """Build a FastMCP server with search_arxiv registered.

    Argument bounds are declared on the tool signature so the host rejects
    out-of-range values before the pipeline runs.
    """
    server = FastMCP(
        SERVER_NAME,
        host=host or config.get_host(),
        port=port or config.get_port(),
    )

    @server.tool(name="search_arxiv", description=TOOL_DESCRIPTION)
    async def search_arxiv_tool(
        category: Annotated[
            str,
            Field(min_length=1, description="arXiv category, e.g. 'cs.AI'"),
        ],
        max_results: Annotated[
            int,
            Field(
                ge=MIN_RESULTS,
                le=MAX_RESULTS,
                description="Number of papers to return",
            ),
        ] = DEFAULT_MAX_RESULTS,
    ) -> str:
        return await search_arxiv(category, max_results)

    return server


def run(transport: Optional[str] = None) -> None:
    """Create the server and block serving on ``transport``."""
    transport = transport or config.get_transport()
    server = create_server()
    logger.info("Starting %s (transport=%s)", SERVER_NAME, transport)
    server.run(transport=transport)
