from __future__ import annotations

import os
from typing import Any, Optional

import pytest


class FakeTransport:
    """Records every request and answers with a canned ``(status, body)``."""

    def __init__(self, status: int = 200, body: Optional[Any] = None):
        self.status = status
        self.body = body
        self.calls: list[tuple[str, str, Optional[Any]]] = []
        self.ignored: list[tuple[int, ...]] = []

    def send(self, method, path, body=None, ignore=()):
        self.calls.append((method, path, body))
        self.ignored.append(ignore)
        return self.status, self.body


@pytest.fixture
def make_transport():
    return FakeTransport


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running OpenSearch/Elasticsearch cluster",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("OPENSEARCH_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set OPENSEARCH_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
