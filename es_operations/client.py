"""Client factory, transport adapter and operation entry point."""

from __future__ import annotations

import logging
from typing import Any, Optional

from opensearchpy import OpenSearch
from opensearchpy.exceptions import TransportError

from .common import Transport
from .config import ConnectionConfig, load_config
from .delete_by_query import DeleteByQueryOperation
from .document import DeleteOperation, IndexOperation
from .search import SearchQueryOperation, SearchURIOperation

logger = logging.getLogger(__name__)


def create_client(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> OpenSearch:
    """Create and return an OpenSearch client.

    Args:
        config: An explicit :class:`ConnectionConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured OpenSearch client instance.
    """
    if config is None:
        config = load_config(**overrides)

    kwargs: dict = {
        "hosts": config.hosts,
        "use_ssl": config.use_ssl,
        "verify_certs": config.verify_certs,
        "ssl_show_warn": config.ssl_show_warn,
        "timeout": config.timeout,
        "http_compress": config.http_compress,
    }

    http_auth = config.http_auth
    if http_auth:
        kwargs["http_auth"] = http_auth

    if config.ca_certs:
        kwargs["ca_certs"] = config.ca_certs

    return OpenSearch(**kwargs)


class OpenSearchTransport:
    """Send raw requests through an ``OpenSearch`` client's connection pool.

    Error statuses reported by the cluster are returned as ordinary
    ``(status, body)`` pairs; only failures to complete the exchange
    (``opensearchpy.ConnectionError`` and friends) raise.
    Statuses passed as *ignore* are expected by the caller; the connection
    returns them without logging a failed request.
    """

    def __init__(self, client: OpenSearch) -> None:
        self.client = client

    def send(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        ignore: tuple[int, ...] = (),
    ) -> tuple[int, Optional[Any]]:
        transport = self.client.transport
        payload = None
        if body is not None:
            payload = transport.serializer.dumps(body).encode("utf-8")

        connection = transport.get_connection()
        try:
            status, headers, raw = connection.perform_request(
                method,
                path,
                body=payload,
                headers={"content-type": "application/json"},
                ignore=ignore,
            )
        except TransportError as exc:
            # ConnectionError and its subclasses carry "N/A" instead of a status
            if not isinstance(exc.status_code, int):
                raise
            logger.debug("%s %s returned %s: %s", method, path, exc.status_code, exc.info)
            info = exc.info if isinstance(exc.info, dict) else None
            return exc.status_code, info

        if not raw:
            return status, None
        return status, transport.deserializer.loads(raw, headers.get("content-type"))


class Client:
    """Entry point that hands out operation builders bound to one transport."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def index(self, index: str, doc_type: str, document: Any) -> IndexOperation:
        return IndexOperation(self.transport, index, doc_type, document)

    def delete(self, index: str, doc_type: str, id: str) -> DeleteOperation:
        return DeleteOperation(self.transport, index, doc_type, id)

    def delete_by_query(self) -> DeleteByQueryOperation:
        return DeleteByQueryOperation(self.transport)

    def search_uri(self) -> SearchURIOperation:
        return SearchURIOperation(self.transport)

    def search_query(self) -> SearchQueryOperation:
        return SearchQueryOperation(self.transport)


def connect(config: Optional[ConnectionConfig] = None, **overrides) -> Client:
    """Build a :class:`Client` backed by a freshly created OpenSearch client."""
    return Client(OpenSearchTransport(create_client(config, **overrides)))
