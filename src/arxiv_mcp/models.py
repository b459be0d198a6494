"""Data models for the arXiv search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")

DEFAULT_MAX_RESULTS = 5
MIN_RESULTS = 1
MAX_RESULTS = 100


@dataclass(frozen=True)
class SearchRequest:
    """A validated search for the newest papers in one arXiv category."""

    category: str
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self):
        if not isinstance(self.category, str) or not self.category:
            raise ValueError("category must be a non-empty string")
        # bool is an int subclass; True is not a result count
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise ValueError("max_results must be an integer")
        if not MIN_RESULTS <= self.max_results <= MAX_RESULTS:
            raise ValueError(
                f"max_results must be between {MIN_RESULTS} and {MAX_RESULTS}, "
                f"got {self.max_results}"
            )


@dataclass
class AuthorRecord:
    name: Optional[str] = None


@dataclass
class FeedEntry:
    """One ``<entry>`` as read from the feed.

    ``author`` mirrors the markup: a single record when the entry has one
    ``<author>`` element, a list when it has several, ``None`` when it has none.
    """

    title: str = ""
    summary: str = ""
    id: str = ""
    author: Union[AuthorRecord, list[AuthorRecord], None] = None


@dataclass
class Feed:
    entries: list[FeedEntry] = field(default_factory=list)
    total_results: Optional[int] = None


@dataclass
class PaperRecord:
    """A normalized paper, ready for formatting."""

    title: str
    authors: str
    summary: str
    link: str


# --- Errors ---


class SearchError(Exception):
    """Base class for failures in the search pipeline."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NetworkError(SearchError):
    """No response was obtained from the API."""


class ApiError(SearchError):
    """The API responded with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"arXiv API returned HTTP {status_code}")
        self.status_code = status_code


class ParseError(SearchError):
    """The response body is not a usable feed document."""

    def __init__(self, detail: str):
        super().__init__(f"Invalid arXiv feed: {detail}")
        self.detail = detail


# --- Stage results ---


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: SearchError


Result = Union[Ok[T], Err]
