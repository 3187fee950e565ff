"""ViewStrategy: renders the traversal as an indented tree."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from json_inspector.categories import display_name

if TYPE_CHECKING:
    from json_inspector.cursor import JsonCursor

__all__ = ["ASCII_GLYPHS", "UNICODE_GLYPHS", "ViewStrategy"]

# (indent group, corner)
UNICODE_GLYPHS: tuple[str, str] = ("│  ", "└─ ")
ASCII_GLYPHS: tuple[str, str] = ("|  ", "+- ")

SUCCESS_MESSAGE = "View completed successfully."


class ViewStrategy:
    """Prints one line per visited node.

    A node at depth ``d`` is rendered as ``d`` indent groups, the corner
    glyph, the key and a space (object members only), then the category in
    parentheses::

        (object)
        │  └─ a (number)
        │  └─ b (object)
        │  │  └─ c (number)

    Args:
        out: Text stream to write to.  Defaults to ``sys.stdout``.
        glyphs: ``(indent, corner)`` pair; see ``UNICODE_GLYPHS`` and
            ``ASCII_GLYPHS``.
        show_indices: Label array elements with ``[i]``.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        *,
        glyphs: tuple[str, str] = UNICODE_GLYPHS,
        show_indices: bool = False,
    ) -> None:
        self._out: TextIO = out if out is not None else sys.stdout
        self._indent, self._corner = glyphs
        self._show_indices = show_indices

    def begin(self, cursor: JsonCursor) -> None:
        self._emit(f"({display_name(cursor.category)})")

    def visit(self, cursor: JsonCursor, depth: int) -> None:
        if cursor.key is not None:
            label = f"{cursor.key} "
        elif self._show_indices and cursor.index is not None:
            label = f"[{cursor.index}] "
        else:
            label = ""
        self._emit(
            f"{self._indent * depth}{self._corner}{label}({display_name(cursor.category)})"
        )

    def finish(self) -> None:
        self._emit("")
        self._emit(SUCCESS_MESSAGE)

    def _emit(self, line: str) -> None:
        print(line, file=self._out)
