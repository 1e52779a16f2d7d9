"""Search API, by URI query string or by Query DSL body."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from .common import (
    Operation,
    Request,
    Transport,
    add_option,
    as_names,
    format_indexes_and_types,
    format_query_string,
    query_to_json,
)
from .errors import UnexpectedStatusError
from .models import SearchResult


class SearchType(str, Enum):
    """Values of the ``search_type`` parameter."""

    DFS_QUERY_THEN_FETCH = "dfs_query_then_fetch"
    DFS_QUERY_AND_FETCH = "dfs_query_and_fetch"
    QUERY_THEN_FETCH = "query_then_fetch"
    QUERY_AND_FETCH = "query_and_fetch"


def _search_path(indexes: Sequence[str], doc_types: Sequence[str], options) -> str:
    return "{}/_search{}".format(
        format_indexes_and_types(indexes, doc_types),
        format_query_string(options),
    )


def _decode(status: int, result: Any) -> SearchResult:
    if status == 200:
        return SearchResult.from_json(result)
    raise UnexpectedStatusError(status, result)


class SearchURIOperation(Operation):
    """Search with every parameter, including the query, in the URI."""

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)
        self.indexes: list[str] = []
        self.doc_types: list[str] = []

    def with_indexes(self, indexes: Union[str, Sequence[str]]) -> SearchURIOperation:
        self.indexes = as_names(indexes)
        return self

    def with_types(self, doc_types: Union[str, Sequence[str]]) -> SearchURIOperation:
        self.doc_types = as_names(doc_types)
        return self

    def with_query(self, qs: str) -> SearchURIOperation:
        self.options.add("q", qs)
        return self

    with_df = add_option("df")
    with_analyzer = add_option("analyzer")
    with_lowercase_expanded_terms = add_option("lowercase_expanded_terms")
    with_analyze_wildcard = add_option("analyze_wildcard")
    with_default_operator = add_option("default_operator")
    with_lenient = add_option("lenient")
    with_explain = add_option("explain")
    with_source = add_option("_source")
    with_sort = add_option("sort")
    with_routing = add_option("routing")
    with_track_scores = add_option("track_scores")
    with_timeout = add_option("timeout")
    with_terminate_after = add_option("terminate_after")
    with_from = add_option("from")
    with_size = add_option("size")
    with_search_type = add_option("search_type")

    def with_fields(self, fields: Union[str, Sequence[str]]) -> SearchURIOperation:
        self.options.add("fields", ",".join(as_names(fields)))
        return self

    def build(self) -> Request:
        return Request("GET", _search_path(self.indexes, self.doc_types, self.options))

    def send(self) -> SearchResult:
        status, result = self._execute()
        return _decode(status, result)


@dataclass
class SearchQueryBody:
    """The JSON body of a Query DSL search.

    ``from`` and ``size`` are always rendered; every other field only when set.
    """

    query: Optional[Any] = None
    timeout: Optional[str] = None
    from_: int = 0
    size: int = 10
    terminate_after: Optional[int] = None
    stats: Optional[list[str]] = None
    min_score: Optional[float] = None

    def to_json(self) -> dict[str, Any]:
        body: dict[str, Any] = {"from": self.from_, "size": self.size}
        if self.query is not None:
            body["query"] = query_to_json(self.query)
        if self.timeout is not None:
            body["timeout"] = self.timeout
        if self.terminate_after is not None:
            body["terminate_after"] = self.terminate_after
        if self.stats is not None:
            body["stats"] = self.stats
        if self.min_score is not None:
            body["min_score"] = self.min_score
        return body


class SearchQueryOperation(Operation):
    """Search with a Query DSL document ``POST``-ed as the body."""

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)
        self.indexes: list[str] = []
        self.doc_types: list[str] = []
        self.body = SearchQueryBody()

    def with_indexes(self, indexes: Union[str, Sequence[str]]) -> SearchQueryOperation:
        self.indexes = as_names(indexes)
        return self

    def with_types(self, doc_types: Union[str, Sequence[str]]) -> SearchQueryOperation:
        self.doc_types = as_names(doc_types)
        return self

    def with_query(self, query: Any) -> SearchQueryOperation:
        self.body.query = query
        return self

    def with_timeout(self, timeout: str) -> SearchQueryOperation:
        self.body.timeout = timeout
        return self

    def with_from(self, from_: int) -> SearchQueryOperation:
        self.body.from_ = from_
        return self

    def with_size(self, size: int) -> SearchQueryOperation:
        self.body.size = size
        return self

    def with_terminate_after(self, terminate_after: int) -> SearchQueryOperation:
        self.body.terminate_after = terminate_after
        return self

    def with_stats(self, stats: Sequence[Any]) -> SearchQueryOperation:
        self.body.stats = [str(s) for s in stats]
        return self

    def with_min_score(self, min_score: float) -> SearchQueryOperation:
        self.body.min_score = min_score
        return self

    with_routing = add_option("routing")
    with_search_type = add_option("search_type")
    with_query_cache = add_option("query_cache")

    def build(self) -> Request:
        return Request(
            "POST",
            _search_path(self.indexes, self.doc_types, self.options),
            self.body.to_json(),
        )

    def send(self) -> SearchResult:
        status, result = self._execute()
        return _decode(status, result)
