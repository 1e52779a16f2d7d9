"""Typed field accessors over decoded JSON responses.

The remote API prefixes its metadata keys with an underscore (``_index``,
``_shards``, ...) while the result models expose plain names. ``WIRE_KEYS``
is the only place that translation is written down; every accessor takes
the exposed name and looks up the wire key through it.
"""

from typing import Any, Mapping, Optional

from .errors import DecodeError

WIRE_KEYS: dict[str, str] = {
    "index": "_index",
    "doc_type": "_type",
    "id": "_id",
    "version": "_version",
    "score": "_score",
    "shards": "_shards",
    "indices": "_indices",
    "source": "_source",
}

_MISSING = object()


def wire_key(name: str) -> str:
    """Return the response key for an exposed field name."""
    return WIRE_KEYS.get(name, name)


def _lookup(raw: Any, name: str) -> Any:
    if not isinstance(raw, Mapping):
        raise DecodeError(f"Expected a JSON object, got {type(raw).__name__}")
    return raw.get(wire_key(name), _MISSING)


def _require(raw: Any, name: str) -> Any:
    value = _lookup(raw, name)
    if value is _MISSING:
        key = wire_key(name)
        raise DecodeError(f"Missing required field {key!r}", key=key)
    return value


def _wrong_type(name: str, expected: str, value: Any) -> DecodeError:
    key = wire_key(name)
    return DecodeError(
        f"Field {key!r} should be {expected}, got {type(value).__name__}",
        key=key,
    )


def find(raw: Any, name: str) -> Optional[Any]:
    """Return the value for *name*, or ``None`` when the key is absent."""
    value = _lookup(raw, name)
    return None if value is _MISSING else value


def get_bool(raw: Any, name: str) -> bool:
    value = _require(raw, name)
    if not isinstance(value, bool):
        raise _wrong_type(name, "a boolean", value)
    return value


def get_str(raw: Any, name: str) -> str:
    value = _require(raw, name)
    if not isinstance(value, str):
        raise _wrong_type(name, "a string", value)
    return value


def get_int(raw: Any, name: str) -> int:
    value = _require(raw, name)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(name, "an integer", value)
    return value


def get_float(raw: Any, name: str) -> float:
    value = _require(raw, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _wrong_type(name, "a number", value)
    return float(value)


def get_object(raw: Any, name: str) -> dict[str, Any]:
    value = _require(raw, name)
    if not isinstance(value, Mapping):
        raise _wrong_type(name, "an object", value)
    return dict(value)


def get_array(raw: Any, name: str) -> list[Any]:
    value = _require(raw, name)
    if not isinstance(value, list):
        raise _wrong_type(name, "an array", value)
    return value
