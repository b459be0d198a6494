"""Build arXiv API queries."""

from __future__ import annotations

from urllib.parse import urlencode

from arxiv_mcp.config import get_api_url
from arxiv_mcp.models import SearchRequest

SORT_BY = "submittedDate"
SORT_ORDER = "descending"


def build_query_params(request: SearchRequest) -> dict[str, str]:
    """Newest-first listing of one category.

    The category is passed through as-is; arXiv decides whether it exists.
    """
    return {
        "search_query": f"cat:{request.category}",
        "sortBy": SORT_BY,
        "sortOrder": SORT_ORDER,
        "max_results": str(request.max_results),
    }


def build_query_url(request: SearchRequest, *, base_url: str | None = None) -> str:
    base_url = base_url or get_api_url()
    return f"{base_url}?{urlencode(build_query_params(request))}"
