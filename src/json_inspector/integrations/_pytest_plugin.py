"""pytest plugin for json-inspector.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  Provides a fixture that counts the nodes of an in-memory
JSON value with the same engine the CLI uses.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_inspector.api import count_nodes
from json_inspector.options import AnalysisOptions
from json_inspector.result import CountResult


@pytest.fixture(scope="session")
def json_node_counts() -> Any:
    """Fixture that returns a callable node counter.

    Usage in tests::

        def test_payload_shape(json_node_counts):
            counts = json_node_counts({"items": [1, 2, 3]}, depth_limit=1)
            assert counts.total == 1

    Returns:
        A callable ``_count(value, root=None, depth_limit=0, excluded_key=None)
        -> CountResult``.  ``value`` is any JSON-serializable Python object.
    """

    def _count(
        value: Any,
        root: str | None = None,
        depth_limit: int = 0,
        excluded_key: str | None = None,
    ) -> CountResult:
        options = AnalysisOptions(
            root=root, depth_limit=depth_limit, excluded_key=excluded_key
        )
        return count_nodes(json.dumps(value).encode("utf-8"), options)

    return _count
