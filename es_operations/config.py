"""Cluster connection settings for es_operations.

Values resolve in three layers, later wins: the ``ConnectionConfig``
defaults, ``OPENSEARCH_*`` environment variables, then keyword overrides
passed to :func:`load_config`.
"""

import os
from dataclasses import dataclass, fields
from typing import Callable, Optional


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class ConnectionConfig:
    """Where the cluster lives and how to talk to it."""

    host: str = "localhost"
    port: int = 9200
    user: str = "admin"
    password: str = "admin"
    use_ssl: bool = True
    verify_certs: bool = False
    ssl_show_warn: bool = False
    ca_certs: Optional[str] = None
    timeout: int = 30
    http_compress: bool = True

    @property
    def http_auth(self) -> Optional[tuple[str, str]]:
        if self.user and self.password:
            return (self.user, self.password)
        return None

    @property
    def hosts(self) -> list[dict]:
        """Return hosts list in the format expected by opensearch-py."""
        scheme = "https" if self.use_ssl else "http"
        return [{"host": self.host, "port": self.port, "scheme": scheme}]


# field name -> (env var, parser); blank string values are ignored
# except for booleans, where any set value must parse.
ENV_VARS: dict[str, tuple[str, Callable[[str], object]]] = {
    "host": ("OPENSEARCH_HOST", str),
    "port": ("OPENSEARCH_PORT", int),
    "user": ("OPENSEARCH_USER", str),
    "password": ("OPENSEARCH_PASSWORD", str),
    "use_ssl": ("OPENSEARCH_USE_SSL", _parse_bool),
    "verify_certs": ("OPENSEARCH_VERIFY_CERTS", _parse_bool),
    "ca_certs": ("OPENSEARCH_CA_CERTS", str),
    "timeout": ("OPENSEARCH_TIMEOUT", int),
    "http_compress": ("OPENSEARCH_HTTP_COMPRESS", _parse_bool),
}


def load_config(**overrides) -> ConnectionConfig:
    """Build a :class:`ConnectionConfig` from env vars and *overrides*.

    Raises:
        ValueError: a boolean env var holds something other than a
            recognised true/false spelling.
        TypeError: an override names something that is not a config field.
    """
    known = {f.name for f in fields(ConnectionConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown config key: {unknown[0]!r}")

    cfg = ConnectionConfig()

    for name, (env_var, parse) in ENV_VARS.items():
        raw = os.getenv(env_var)
        if raw is None:
            continue
        if parse is not _parse_bool and not raw:
            continue
        setattr(cfg, name, parse(raw))

    for name, value in overrides.items():
        setattr(cfg, name, value)

    return cfg
