"""json-inspector - streaming tree view and node counts for JSON documents."""

from __future__ import annotations

__version__: str = "0.1.0"

from json_inspector.api import count_nodes, inspect_file, render_tree  # noqa: E402
from json_inspector.categories import TypeCategory, classify  # noqa: E402
from json_inspector.cursor import JsonCursor  # noqa: E402
from json_inspector.engine import run, should_descend, traverse  # noqa: E402
from json_inspector.errors import (  # noqa: E402
    ConfigurationError,
    JsonInspectorError,
    ParseError,
    RootNotFoundError,
)
from json_inspector.options import (  # noqa: E402
    AnalysisMethod,
    AnalysisOptions,
    resolve_options,
)
from json_inspector.result import CountResult  # noqa: E402

__all__: list[str] = [
    "AnalysisMethod",
    "AnalysisOptions",
    "ConfigurationError",
    "CountResult",
    "JsonCursor",
    "JsonInspectorError",
    "ParseError",
    "RootNotFoundError",
    "TypeCategory",
    "classify",
    "count_nodes",
    "inspect_file",
    "render_tree",
    "resolve_options",
    "run",
    "should_descend",
    "traverse",
]
