"""Exceptions raised by es_operations.

Transport-level failures (connection refused, TLS, timeouts) are the
opensearch-py exceptions themselves and are not wrapped here.
"""

from typing import Any, Optional


class EsError(Exception):
    """Base class for errors reported by this library."""


class UnexpectedStatusError(EsError):
    """The remote returned a status the operation does not handle."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        super().__init__(f"Unexpected status: {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(EsError):
    """A response did not have the shape the operation requires."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class MissingFieldError(EsError):
    """An optional part of a response was requested but not returned."""
