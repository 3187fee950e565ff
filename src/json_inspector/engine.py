"""Traversal engine: gating policy, depth-first walk and root relocation.

The engine owns all descent decisions; strategies only observe nodes.

Gating:
    A visited container is descended into iff
    ``(depth_limit == 0 or depth_limit > depth)`` and the node is not an
    object member whose key equals ``excluded_key``.  Array elements have no
    key and are never excluded.

Depth:
    Children of the start node are at depth 1.  Depth and exclusion are both
    relative to the relocated root when ``options.root`` is set.

The walk is driven by the cursor's own stack of entered containers rather
than by Python recursion, so document nesting is not bounded by the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from json_inspector.errors import RootNotFoundError
from json_inspector.paths import format_path

if TYPE_CHECKING:
    from json_inspector.cursor import JsonCursor
    from json_inspector.options import AnalysisOptions
    from json_inspector.strategies.protocols import AnalysisStrategy

__all__ = ["Visitor", "relocate", "run", "should_descend", "traverse"]

logger = logging.getLogger(__name__)

Visitor = Callable[["JsonCursor", int], None]


def should_descend(cursor: JsonCursor, options: AnalysisOptions, depth: int) -> bool:
    """Return True if the node under ``cursor`` at ``depth`` may be entered."""
    within_limit = options.depth_limit == 0 or options.depth_limit > depth
    excluded = (
        cursor.key is not None
        and options.excluded_key is not None
        and cursor.key == options.excluded_key
    )
    return within_limit and not excluded


def traverse(
    cursor: JsonCursor,
    options: AnalysisOptions,
    on_visit: Visitor,
    depth: int = 1,
) -> int:
    """Visit every reachable node below the container the cursor is inside.

    Args:
        cursor:   Positioned inside an entered container.  That container is
                  left entered on return; the caller owns its ``leave()``.
        options:  Gating controls.
        on_visit: Called as ``on_visit(cursor, depth)`` for each node.
        depth:    Depth of the container's children.

    Returns:
        The number of visited nodes.
    """
    start = depth
    visited = 0
    while True:
        if cursor.next_sibling():
            visited += 1
            on_visit(cursor, depth)
            if should_descend(cursor, options, depth) and cursor.enter():
                depth += 1
            continue
        if depth == start:
            return visited
        cursor.leave()
        depth -= 1


def relocate(cursor: JsonCursor, options: AnalysisOptions) -> None:
    """Move the cursor onto ``options.root``; no-op when no root is set.

    Raises:
        RootNotFoundError: If the path does not resolve.
    """
    segments = options.root_segments
    if not segments:
        return
    logger.debug("Relocating to root %s", format_path(segments))
    if not cursor.find(segments):
        raise RootNotFoundError(options.root or "")


def run(cursor: JsonCursor, options: AnalysisOptions, strategy: AnalysisStrategy) -> None:
    """Relocate, then drive ``strategy`` over the start node's children.

    A start node that is not a container produces no visits.  Without a root
    path the whole document is read, so trailing garbage raises ``ParseError``;
    a relocated traversal stops reading once the start node is exhausted.
    """
    relocate(cursor, options)
    strategy.begin(cursor)
    with cursor.descended() as entered:
        visited = traverse(cursor, options, strategy.visit) if entered else 0
    if not options.root_segments:
        cursor.expect_end()
    logger.debug(
        "Visited %d nodes (depth_limit=%d, excluded_key=%r)",
        visited,
        options.depth_limit,
        options.excluded_key,
    )
    strategy.finish()
