"""Shared request primitives: options, query strings, target paths."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, NamedTuple, Optional, Protocol, Union
from urllib.parse import quote, urlencode

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """The capability operations are sent through.

    Non-2xx statuses come back as ordinary results; only failures to
    complete the exchange raise. *ignore* lists the error statuses the
    caller expects, so the transport need not treat them as failures.
    """

    def send(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        ignore: tuple[int, ...] = (),
    ) -> tuple[int, Optional[Any]]:
        ...


class Request(NamedTuple):
    method: str
    path: str
    body: Optional[dict[str, Any]] = None


class Options:
    """Ordered ``(name, value)`` request parameters.

    Names are not de-duplicated; rendering keeps insertion order.
    """

    def __init__(self, pairs: Optional[Iterable[tuple[str, str]]] = None) -> None:
        self._pairs: list[tuple[str, str]] = list(pairs) if pairs else []

    def add(self, name: str, value: Any) -> None:
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, bool):
            value = str(value).lower()
        self._pairs.append((name, str(value)))

    def copy(self) -> Options:
        return Options(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"Options({self._pairs!r})"


def format_query_string(options: Iterable[tuple[str, str]]) -> str:
    """Render options as ``?k=v&k2=v2``, or ``""`` when there are none."""
    pairs = list(options)
    if not pairs:
        return ""
    return "?" + urlencode(pairs, quote_via=quote)


def as_names(names: Union[str, Iterable[str]]) -> list[str]:
    """Normalize index, type or field names to a list; a bare string is one name."""
    if isinstance(names, str):
        return [names]
    return list(names)


def format_indexes_and_types(indexes: Iterable[str], doc_types: Iterable[str]) -> str:
    """Render the ``/{indexes}/{types}`` prefix of a multi-index path.

    Returns ``""`` when there are no indexes. The types segment only
    follows an indexes segment, so types given without indexes are dropped.
    """
    indexes = list(indexes)
    doc_types = list(doc_types)
    if not indexes:
        return ""
    if not doc_types:
        return "/" + ",".join(indexes)
    return "/" + ",".join(indexes) + "/" + ",".join(doc_types)


def query_to_json(query: Any) -> dict[str, Any]:
    """Convert a structured query into a plain JSON object.

    Accepts a mapping or anything with ``to_dict()`` (e.g. opensearch-py's
    ``Q`` objects).
    """
    if hasattr(query, "to_dict"):
        return query.to_dict()
    if isinstance(query, Mapping):
        return dict(query)
    raise TypeError(f"Cannot convert {type(query).__name__} to a query document")


def add_option(name: str):
    """Build a chainable ``with_*`` method that appends the *name* parameter."""

    def setter(self, value: Any):
        self.options.add(name, value)
        return self

    setter.__doc__ = f"Add the ``{name}`` request parameter."
    return setter


class Operation:
    """Base for operation builders: holds the transport and the options.

    Subclasses render their request in ``build()`` and decode the result in
    ``send()``. ``expected_error_statuses`` are non-2xx statuses that
    ``send()`` turns into a normal outcome.
    """

    expected_error_statuses: tuple[int, ...] = ()

    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self.options = Options()

    def build(self) -> Request:
        raise NotImplementedError

    def _execute(self) -> tuple[int, Optional[Any]]:
        request = self.build()
        logger.info("%s %s", request.method, request.path)
        status, result = self.transport.send(
            request.method,
            request.path,
            request.body,
            ignore=self.expected_error_statuses,
        )
        logger.info("%s %s -> status %s", request.method, request.path, status)
        logger.debug("Response body: %s", result)
        return status, result
