"""Tests for arxiv_mcp.query — query parameters and URL construction."""

from urllib.parse import parse_qs, urlsplit

from arxiv_mcp.models import SearchRequest
from arxiv_mcp.query import build_query_params, build_query_url


class TestBuildQueryParams:
    def test_four_fixed_parameters(self):
        params = build_query_params(SearchRequest(category="cs.AI", max_results=7))
        assert params == {
            "search_query": "cat:cs.AI",
            "sortBy": "submittedDate",
            "sortOrder": "descending",
            "max_results": "7",
        }

    def test_category_passed_through(self):
        params = build_query_params(SearchRequest(category="bogus"))
        assert params["search_query"] == "cat:bogus"


class TestBuildQueryUrl:
    def test_default_endpoint(self, monkeypatch):
        monkeypatch.delenv("ARXIV_API_URL", raising=False)
        url = build_query_url(SearchRequest(category="math.CO"))
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://export.arxiv.org/api/query"
        query = parse_qs(parts.query)
        assert query["search_query"] == ["cat:math.CO"]
        assert query["max_results"] == ["5"]

    def test_endpoint_from_env(self, monkeypatch):
        monkeypatch.setenv("ARXIV_API_URL", "http://localhost:9000/api/query")
        url = build_query_url(SearchRequest(category="cs.AI"))
        assert url.startswith("http://localhost:9000/api/query?")

    def test_explicit_base_url_wins(self, monkeypatch):
        monkeypatch.setenv("ARXIV_API_URL", "http://ignored")
        url = build_query_url(SearchRequest(category="cs.AI"), base_url="http://mirror/q")
        assert url.startswith("http://mirror/q?")
