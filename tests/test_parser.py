"""Tests for arxiv_mcp.parser — Atom feed parsing and author arity."""

from arxiv_mcp.models import AuthorRecord, Err, Ok, ParseError
from arxiv_mcp.parser import parse_feed

ARXIV_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/"
      xmlns:arxiv="http://arxiv.org/schemas/atom">
  <title type="html">ArXiv Query: search_query=cat:cs.AI</title>
  <id>http://arxiv.org/api/abc</id>
  <opensearch:totalResults>12345</opensearch:totalResults>
  <opensearch:startIndex>0</opensearch:startIndex>
  <opensearch:itemsPerPage>2</opensearch:itemsPerPage>
  <entry>
    <id>http://arxiv.org/abs/2410.00001v1</id>
    <title>Scaling Laws for Tiny Models</title>
    <summary>  We study scaling laws.
    </summary>
    <author><name>John Doe</name></author>
    <author><name>Jane Smith</name><arxiv:affiliation>MIT</arxiv:affiliation></author>
    <arxiv:primary_category term="cs.AI"/>
  </entry>
  <entry>
    <id>http://arxiv.org/abs/2410.00002v1</id>
    <title>A Single Author Paper</title>
    <summary>Solo work.</summary>
    <author><name>Solo Author</name></author>
  </entry>
</feed>"""

EMPTY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <title type="html">ArXiv Query: search_query=cat:nothing</title>
  <opensearch:totalResults>0</opensearch:totalResults>
</feed>"""


class TestParseFeed:
    def test_entries_in_order(self):
        result = parse_feed(ARXIV_FEED)
        assert isinstance(result, Ok)
        entries = result.value.entries
        assert [e.title for e in entries] == [
            "Scaling Laws for Tiny Models",
            "A Single Author Paper",
        ]

    def test_fields(self):
        entry = parse_feed(ARXIV_FEED).value.entries[0]
        assert entry.id == "http://arxiv.org/abs/2410.00001v1"
        assert entry.summary == "We study scaling laws."

    def test_total_results(self):
        assert parse_feed(ARXIV_FEED).value.total_results == 12345

    def test_several_authors_become_list(self):
        entry = parse_feed(ARXIV_FEED).value.entries[0]
        assert entry.author == [AuthorRecord("John Doe"), AuthorRecord("Jane Smith")]

    def test_one_author_stays_single_record(self):
        entry = parse_feed(ARXIV_FEED).value.entries[1]
        assert entry.author == AuthorRecord("Solo Author")

    def test_no_author(self):
        xml = "<feed><entry><title>T</title><id>x</id></entry></feed>"
        entry = parse_feed(xml).value.entries[0]
        assert entry.author is None
        assert entry.summary == ""

    def test_author_without_name(self):
        xml = "<feed><entry><author></author></entry></feed>"
        entry = parse_feed(xml).value.entries[0]
        assert entry.author == AuthorRecord(name=None)

    def test_author_with_empty_name(self):
        xml = "<feed><entry><author><name></name></author></entry></feed>"
        entry = parse_feed(xml).value.entries[0]
        assert entry.author == AuthorRecord(name="")

    def test_unnamespaced_feed(self):
        xml = "<feed><entry><title>Plain</title></entry></feed>"
        result = parse_feed(xml)
        assert result.value.entries[0].title == "Plain"
        assert result.value.total_results is None


class TestEmptyFeed:
    def test_empty_feed_is_not_an_error(self):
        result = parse_feed(EMPTY_FEED)
        assert isinstance(result, Ok)
        assert result.value.entries == []
        assert result.value.total_results == 0


class TestParseErrors:
    def test_malformed_xml(self):
        result = parse_feed("<feed><entry>")
        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert "malformed XML" in result.error.message

    def test_not_xml(self):
        result = parse_feed("Rate exceeded.")
        assert isinstance(result.error, ParseError)

    def test_missing_feed_root(self):
        result = parse_feed("<html><body>Service unavailable</body></html>")
        assert isinstance(result, Err)
        assert "<html>" in result.error.message
