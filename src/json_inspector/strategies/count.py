"""CountStrategy: tallies visited nodes per TypeCategory.

Counts live in a fixed-size numpy ``int64`` vector indexed by the
enumeration order of ``TypeCategory``, so state stays constant-size no matter
how large the document is.  Nothing is printed until ``finish()``.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import numpy as np

from json_inspector.categories import TypeCategory
from json_inspector.result import CountResult

if TYPE_CHECKING:
    from json_inspector.cursor import JsonCursor

__all__ = ["CountStrategy"]

_POSITION: dict[TypeCategory, int] = {
    category: i for i, category in enumerate(TypeCategory)
}


class CountStrategy:
    """Counts nodes by category and prints the report when finished.

    Args:
        out: Text stream for the report.  Defaults to ``sys.stdout``.
        report: When False, ``finish()`` prints nothing; use ``result()``.
    """

    def __init__(self, out: TextIO | None = None, *, report: bool = True) -> None:
        self._out: TextIO = out if out is not None else sys.stdout
        self._report = report
        self._counts: np.ndarray = np.zeros(len(TypeCategory), dtype=np.int64)

    def begin(self, cursor: JsonCursor) -> None:
        self._counts[:] = 0

    def visit(self, cursor: JsonCursor, depth: int) -> None:
        self._counts[_POSITION[cursor.category]] += 1

    def finish(self) -> None:
        if not self._report:
            return
        for line in self.result().lines():
            print(line, file=self._out)

    def result(self) -> CountResult:
        return CountResult.from_array(self._counts)
