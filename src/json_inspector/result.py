"""CountResult dataclass for the Count strategy's output.

This module provides the immutable tally returned by ``count_nodes()``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from json_inspector.categories import TypeCategory, display_name

__all__ = ["CountResult"]


@dataclass(frozen=True, slots=True)
class CountResult:
    """Per-category node counts of one traversal.

    Attributes:
        counts: Mapping from every ``TypeCategory`` to its count.  Categories
            missing from the mapping read as 0.
    """

    counts: dict[TypeCategory, int]

    @classmethod
    def from_array(cls, array: np.ndarray) -> CountResult:
        """Build a result from a vector ordered like ``TypeCategory``."""
        return cls({category: int(array[i]) for i, category in enumerate(TypeCategory)})

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def __getitem__(self, category: TypeCategory) -> int:
        return self.counts.get(category, 0)

    def as_array(self) -> np.ndarray:
        """Return the counts as an ``int64`` vector in enumeration order."""
        return np.array([self[category] for category in TypeCategory], dtype=np.int64)

    def lines(self) -> list[str]:
        """Report lines: total, blank line, then one line per category."""
        return [
            f"Total nodes: {self.total}",
            "",
            *(f"{self[category]} ({display_name(category)})" for category in TypeCategory),
        ]
