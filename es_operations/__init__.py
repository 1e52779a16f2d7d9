"""Typed request builders and response decoders for an ES-style REST API."""

from .client import Client, OpenSearchTransport, connect, create_client
from .common import Options, Request, format_indexes_and_types, format_query_string
from .config import ConnectionConfig, load_config
from .decoding import WIRE_KEYS, wire_key
from .delete_by_query import DeleteByQueryOperation
from .document import DeleteOperation, IndexOperation
from .errors import DecodeError, EsError, MissingFieldError, UnexpectedStatusError
from .models import (
    DeleteByQueryIndexResult,
    DeleteByQueryResult,
    DeleteResult,
    IndexResult,
    SearchHitsHitsResult,
    SearchHitsResult,
    SearchResult,
    ShardCountResult,
)
from .search import SearchQueryOperation, SearchType, SearchURIOperation

__all__ = [
    # client
    "Client",
    "OpenSearchTransport",
    "connect",
    "create_client",
    # config
    "ConnectionConfig",
    "load_config",
    # request primitives
    "Options",
    "Request",
    "format_indexes_and_types",
    "format_query_string",
    "WIRE_KEYS",
    "wire_key",
    # operations
    "IndexOperation",
    "DeleteOperation",
    "DeleteByQueryOperation",
    "SearchURIOperation",
    "SearchQueryOperation",
    "SearchType",
    # results
    "ShardCountResult",
    "DeleteResult",
    "IndexResult",
    "DeleteByQueryIndexResult",
    "DeleteByQueryResult",
    "SearchHitsHitsResult",
    "SearchHitsResult",
    "SearchResult",
    # errors
    "EsError",
    "UnexpectedStatusError",
    "DecodeError",
    "MissingFieldError",
]
