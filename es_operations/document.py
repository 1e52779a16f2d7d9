"""Single-document operations: index and delete by id."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from .common import Operation, Request, Transport, add_option, format_query_string
from .errors import UnexpectedStatusError
from .models import DeleteResult, IndexResult


def document_to_json(document: Any) -> dict[str, Any]:
    """Serialize a document given as a mapping, pydantic model or ``to_dict()`` object."""
    if isinstance(document, BaseModel):
        return document.model_dump(mode="json")
    if hasattr(document, "to_dict"):
        return document.to_dict()
    if isinstance(document, Mapping):
        return dict(document)
    raise TypeError(f"Cannot serialize {type(document).__name__} as a document")


class IndexOperation(Operation):
    """Index (insert or replace) one document.

    With an id the document is ``PUT`` to ``/{index}/{type}/{id}``; without
    one it is ``POST`` to ``/{index}/{type}`` and the id is generated remotely.
    """

    def __init__(
        self,
        transport: Transport,
        index: str,
        doc_type: str,
        document: Any,
    ) -> None:
        super().__init__(transport)
        self.index = index
        self.doc_type = doc_type
        self.document = document
        self.id: Optional[str] = None

    def with_id(self, id: str) -> IndexOperation:
        self.id = id
        return self

    def with_document(self, document: Any) -> IndexOperation:
        self.document = document
        return self

    with_ttl = add_option("ttl")
    with_version = add_option("version")
    with_version_type = add_option("version_type")
    with_timestamp = add_option("timestamp")
    with_routing = add_option("routing")
    with_parent = add_option("parent")
    with_op_type = add_option("op_type")
    with_refresh = add_option("refresh")
    with_timeout = add_option("timeout")

    def build(self) -> Request:
        body = document_to_json(self.document)
        query_string = format_query_string(self.options)
        if self.id is None:
            return Request("POST", f"/{self.index}/{self.doc_type}{query_string}", body)
        return Request(
            "PUT", f"/{self.index}/{self.doc_type}/{self.id}{query_string}", body
        )

    def send(self) -> IndexResult:
        status, result = self._execute()
        if status in (200, 201):
            return IndexResult.from_json(result)
        raise UnexpectedStatusError(status, result)


class DeleteOperation(Operation):
    """Delete one document by index, type and id."""

    def __init__(self, transport: Transport, index: str, doc_type: str, id: str) -> None:
        super().__init__(transport)
        self.index = index
        self.doc_type = doc_type
        self.id = id

    with_version = add_option("version")
    with_routing = add_option("routing")
    with_parent = add_option("parent")
    with_consistency = add_option("consistency")
    with_refresh = add_option("refresh")
    with_timeout = add_option("timeout")

    def build(self) -> Request:
        return Request(
            "DELETE",
            f"/{self.index}/{self.doc_type}/{self.id}{format_query_string(self.options)}",
        )

    def send(self) -> DeleteResult:
        status, result = self._execute()
        if status == 200:
            return DeleteResult.from_json(result)
        raise UnexpectedStatusError(status, result)
