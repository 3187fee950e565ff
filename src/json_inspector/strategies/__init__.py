"""Analysis strategies driven by the traversal engine.

Both strategies satisfy the ``AnalysisStrategy`` Protocol structurally:

- ``ViewStrategy``:  prints an indented tree, one line per node.
- ``CountStrategy``: tallies nodes per category, prints a summary at the end.
"""

from json_inspector.strategies.count import CountStrategy
from json_inspector.strategies.protocols import AnalysisStrategy
from json_inspector.strategies.view import ASCII_GLYPHS, UNICODE_GLYPHS, ViewStrategy

__all__ = [
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "AnalysisStrategy",
    "CountStrategy",
    "ViewStrategy",
]
