"""Integration tests for the json-inspector pytest plugin.

These tests verify that the json_node_counts fixture is auto-discovered via the
pytest11 entry point and behaves correctly.

NOTE: These tests require json-inspector to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_inspector import CountResult, RootNotFoundError, TypeCategory


def test_fixture_counts_python_value(json_node_counts: Any) -> None:
    result = json_node_counts({"a": 1, "b": {"c": 2}})
    assert isinstance(result, CountResult)
    assert result.total == 3
    assert result[TypeCategory.NUMBER] == 2


def test_fixture_forwards_options(json_node_counts: Any) -> None:
    assert json_node_counts({"a": 1, "b": {"c": 2}}, depth_limit=1).total == 2
    assert json_node_counts({"a": 1, "b": {"c": 2}}, excluded_key="b").total == 2
    assert json_node_counts({"a": 1, "b": {"c": 2}}, root="b").total == 1


def test_fixture_handles_scalars_and_lists(json_node_counts: Any) -> None:
    assert json_node_counts(None).total == 0
    assert json_node_counts([True, None, "x"])[TypeCategory.BOOLEAN] == 1


def test_fixture_propagates_root_errors(json_node_counts: Any) -> None:
    with pytest.raises(RootNotFoundError):
        json_node_counts({"a": 1}, root="b")
