"""Public API functions for json-inspector.

This module provides the user-facing functions: count_nodes, render_tree and
inspect_file.  Each call builds a fresh cursor and strategy, so no state is
shared between calls.
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from json_inspector.cursor import JsonCursor
from json_inspector.engine import run
from json_inspector.options import AnalysisMethod, AnalysisOptions
from json_inspector.result import CountResult
from json_inspector.strategies import (
    ASCII_GLYPHS,
    UNICODE_GLYPHS,
    AnalysisStrategy,
    CountStrategy,
    ViewStrategy,
)

__all__ = ["Source", "count_nodes", "create_strategy", "inspect_file", "render_tree"]

# A filesystem path, or an in-memory JSON document.
Source = str | os.PathLike[str] | bytes


@contextmanager
def _open_cursor(source: Source) -> Iterator[JsonCursor]:
    if isinstance(source, bytes):
        yield JsonCursor.from_bytes(source)
        return
    with open(source, "rb") as fh:
        yield JsonCursor(fh)


def create_strategy(
    method: AnalysisMethod,
    out: TextIO | None = None,
    *,
    ascii_glyphs: bool = False,
) -> AnalysisStrategy:
    """Return the strategy implementing ``method``, writing to ``out``."""
    if method is AnalysisMethod.VIEW:
        return ViewStrategy(out, glyphs=ASCII_GLYPHS if ascii_glyphs else UNICODE_GLYPHS)
    return CountStrategy(out)


def inspect_file(
    source: Source,
    method: AnalysisMethod,
    options: AnalysisOptions | None = None,
    out: TextIO | None = None,
    *,
    ascii_glyphs: bool = False,
) -> None:
    """Run one analysis and print its report.

    Args:
        source:  Path of the JSON file, or the document as bytes.
        method:  View or Count.
        options: Traversal controls.  Defaults to ``AnalysisOptions()``.
        out:     Text stream for the report.  Defaults to ``sys.stdout``.
        ascii_glyphs: Use ASCII tree glyphs in view mode.

    Raises:
        RootNotFoundError: If ``options.root`` does not resolve.
        ParseError: If the document is not well-formed JSON.
        OSError: If the file cannot be opened or read.
    """
    options = options if options is not None else AnalysisOptions()
    strategy = create_strategy(method, out, ascii_glyphs=ascii_glyphs)
    with _open_cursor(source) as cursor:
        run(cursor, options, strategy)


def count_nodes(source: Source, options: AnalysisOptions | None = None) -> CountResult:
    """Return per-category node counts without printing anything.

    Example::

        result = count_nodes(b'{"a": 1, "b": {"c": 2}}')
        result.total                      # 3
        result[TypeCategory.NUMBER]       # 2
    """
    options = options if options is not None else AnalysisOptions()
    strategy = CountStrategy(report=False)
    with _open_cursor(source) as cursor:
        run(cursor, options, strategy)
    return strategy.result()


def render_tree(
    source: Source,
    options: AnalysisOptions | None = None,
    *,
    ascii_glyphs: bool = False,
) -> str:
    """Return the view-mode output as a string."""
    buffer = io.StringIO()
    inspect_file(source, AnalysisMethod.VIEW, options, buffer, ascii_glyphs=ascii_glyphs)
    return buffer.getvalue()
