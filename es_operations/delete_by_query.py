"""Delete-by-query API.

The query is sent either as the ``q`` query-string parameter or as a
Query DSL document in the request body, never both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
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
from .models import DeleteByQueryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryString:
    text: str


@dataclass(frozen=True)
class QueryDocument:
    query: Any

    def to_json(self) -> dict[str, Any]:
        return {"query": query_to_json(self.query)}


QueryOption = Union[QueryString, QueryDocument]


class DeleteByQueryOperation(Operation):
    expected_error_statuses = (404,)

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)
        self.indexes: list[str] = []
        self.doc_types: list[str] = []
        self.query: QueryOption = QueryString("")

    def with_indexes(self, indexes: Union[str, Sequence[str]]) -> DeleteByQueryOperation:
        self.indexes = as_names(indexes)
        return self

    def with_doc_types(self, doc_types: Union[str, Sequence[str]]) -> DeleteByQueryOperation:
        self.doc_types = as_names(doc_types)
        return self

    def with_query_string(self, qs: str) -> DeleteByQueryOperation:
        """Send *qs* as the ``q`` parameter, replacing any earlier query."""
        self.query = QueryString(qs)
        return self

    def with_query(self, query: Any) -> DeleteByQueryOperation:
        """Send *query* as a Query DSL body, replacing any earlier query."""
        self.query = QueryDocument(query)
        return self

    with_df = add_option("df")
    with_analyzer = add_option("analyzer")
    with_default_operator = add_option("default_operator")
    with_routing = add_option("routing")
    with_consistency = add_option("consistency")

    def build(self) -> Request:
        options = self.options.copy()
        body: Optional[dict[str, Any]] = None
        if isinstance(self.query, QueryString):
            options.add("q", self.query.text)
        else:
            body = self.query.to_json()
        path = "{}/_query{}".format(
            format_indexes_and_types(self.indexes, self.doc_types),
            format_query_string(options),
        )
        return Request("DELETE", path, body)

    def send(self) -> Optional[DeleteByQueryResult]:
        """Run the delete.

        Returns ``None`` when the remote answers 404 (nothing matched).
        """
        status, result = self._execute()
        if status == 200:
            return DeleteByQueryResult.from_json(result)
        if status == 404:
            logger.info("Delete-by-query matched nothing (status 404)")
            return None
        raise UnexpectedStatusError(status, result)
