"""Typed results decoded from operation responses."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .decoding import (
    find,
    get_array,
    get_bool,
    get_float,
    get_int,
    get_object,
    get_str,
)
from .errors import DecodeError, MissingFieldError

logger = logging.getLogger(__name__)


class ShardCountResult(BaseModel):
    """Shard totals attached to write, delete-by-query and search responses."""

    total: int
    successful: int
    failed: int

    @classmethod
    def from_json(cls, raw: Any) -> ShardCountResult:
        return cls(
            total=get_int(raw, "total"),
            successful=get_int(raw, "successful"),
            failed=get_int(raw, "failed"),
        )


class DeleteResult(BaseModel):
    found: bool
    index: str
    doc_type: str
    id: str
    version: int

    @classmethod
    def from_json(cls, raw: Any) -> DeleteResult:
        return cls(
            found=get_bool(raw, "found"),
            index=get_str(raw, "index"),
            doc_type=get_str(raw, "doc_type"),
            id=get_str(raw, "id"),
            version=get_int(raw, "version"),
        )


class IndexResult(BaseModel):
    created: bool
    index: str
    doc_type: str
    id: str
    version: int

    @classmethod
    def from_json(cls, raw: Any) -> IndexResult:
        return cls(
            created=get_bool(raw, "created"),
            index=get_str(raw, "index"),
            doc_type=get_str(raw, "doc_type"),
            id=get_str(raw, "id"),
            version=get_int(raw, "version"),
        )


class DeleteByQueryIndexResult(BaseModel):
    shards: ShardCountResult

    def successful(self) -> bool:
        return self.shards.failed == 0

    @classmethod
    def from_json(cls, raw: Any) -> DeleteByQueryIndexResult:
        return cls(shards=ShardCountResult.from_json(get_object(raw, "shards")))


class DeleteByQueryResult(BaseModel):
    """Per-index outcome of a delete-by-query request."""

    indices: dict[str, DeleteByQueryIndexResult] = Field(default_factory=dict)

    def successful(self) -> bool:
        """True when no index reported a failed shard."""
        return all(result.successful() for result in self.indices.values())

    @classmethod
    def from_json(cls, raw: Any) -> DeleteByQueryResult:
        logger.debug("Decoding delete-by-query result: %s", raw)
        indices = {
            name: DeleteByQueryIndexResult.from_json(value)
            for name, value in get_object(raw, "indices").items()
        }
        return cls(indices=indices)


class SearchHitsHitsResult(BaseModel):
    """One matching document.

    ``source`` and ``fields`` are only present when the request's
    projection asked for them; absence is kept as ``None``.
    """

    index: str
    doc_type: str
    id: str
    score: float
    source: Optional[dict[str, Any]] = None
    fields: Optional[dict[str, Any]] = None

    def source_as(self, shape: Any) -> Any:
        """Validate the stored document into *shape*.

        *shape* is anything pydantic can adapt: a model class, a dataclass,
        a ``TypedDict`` or a plain type such as ``dict[str, Any]``.

        Raises:
            MissingFieldError: the hit was returned without ``_source``.
            DecodeError: the stored document does not fit *shape*.
        """
        if self.source is None:
            raise MissingFieldError("No source field")
        try:
            return TypeAdapter(shape).validate_python(self.source)
        except ValidationError as exc:
            raise DecodeError(f"Cannot decode source: {exc}", key="_source") from exc

    @classmethod
    def from_json(cls, raw: Any) -> SearchHitsHitsResult:
        source = find(raw, "source")
        fields = find(raw, "fields")
        return cls(
            index=get_str(raw, "index"),
            doc_type=get_str(raw, "doc_type"),
            id=get_str(raw, "id"),
            score=get_float(raw, "score"),
            source=None if source is None else get_object(raw, "source"),
            fields=None if fields is None else get_object(raw, "fields"),
        )


class SearchHitsResult(BaseModel):
    total: int
    hits: list[SearchHitsHitsResult] = Field(default_factory=list)

    @classmethod
    def from_json(cls, raw: Any) -> SearchHitsResult:
        return cls(
            total=get_int(raw, "total"),
            hits=[SearchHitsHitsResult.from_json(hit) for hit in get_array(raw, "hits")],
        )


class SearchResult(BaseModel):
    shards: ShardCountResult
    hits: SearchHitsResult

    @classmethod
    def from_json(cls, raw: Any) -> SearchResult:
        return cls(
            shards=ShardCountResult.from_json(get_object(raw, "shards")),
            hits=SearchHitsResult.from_json(get_object(raw, "hits")),
        )
