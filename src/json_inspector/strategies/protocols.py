"""AnalysisStrategy Protocol: the per-node capability the engine drives.

A strategy needs no base class: any object with conformant ``begin``,
``visit`` and ``finish`` methods passes ``isinstance`` checks.

Example::

    from json_inspector.strategies.protocols import AnalysisStrategy

    class KeyCollector:
        def __init__(self) -> None:
            self.keys: list[str] = []

        def begin(self, cursor) -> None: ...

        def visit(self, cursor, depth: int) -> None:
            if cursor.key is not None:
                self.keys.append(cursor.key)

        def finish(self) -> None: ...

    assert isinstance(KeyCollector(), AnalysisStrategy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_inspector.cursor import JsonCursor


@runtime_checkable
class AnalysisStrategy(Protocol):
    """Structural protocol for analysis strategies.

    The engine calls, in order:
    - ``begin(cursor)`` once, with the cursor on the start node.
    - ``visit(cursor, depth)`` once per visited node, depth starting at 1
      for the start node's children.  The cursor must not be moved.
    - ``finish()`` once, after the traversal completed.
    """

    def begin(self, cursor: JsonCursor) -> None: ...

    def visit(self, cursor: JsonCursor, depth: int) -> None: ...

    def finish(self) -> None: ...
