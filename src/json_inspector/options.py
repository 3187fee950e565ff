"""AnalysisOptions and AnalysisMethod: resolved, immutable run configuration.

Raw values (as typed on the command line) are resolved exactly once by the
helpers in this module.  The resulting ``AnalysisOptions`` is a frozen
dataclass threaded explicitly through the engine and the strategies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto

from json_inspector.errors import (
    DuplicateAnalysisMethodError,
    InvalidDepthError,
    MissingAnalysisMethodError,
)
from json_inspector.paths import PathSegment, parse_path

__all__ = [
    "AnalysisMethod",
    "AnalysisOptions",
    "parse_depth",
    "resolve_excluded_key",
    "resolve_options",
    "resolve_root",
    "select_method",
]

_DEPTH = re.compile(r"\+?[0-9]+")


class AnalysisMethod(StrEnum):
    """Which analysis strategy drives the traversal.

    - VIEW:  indented tree of keys and value categories.
    - COUNT: per-category node tallies.
    """

    VIEW = auto()
    COUNT = auto()


@dataclass(frozen=True, slots=True)
class AnalysisOptions:
    """Immutable traversal controls.

    Attributes:
        root: Path of the node whose children are traversed.  ``None``
            starts at the document root.  See ``json_inspector.paths`` for the
            accepted notations.
        depth_limit: Maximum depth whose nodes may be descended into is
            ``depth_limit - 1``; 0 means unlimited.
        excluded_key: Object members with this key are visited but never
            descended into.  At most one key; ``None`` disables exclusion.
    """

    root: str | None = None
    depth_limit: int = 0
    excluded_key: str | None = None

    def __post_init__(self) -> None:
        if (
            isinstance(self.depth_limit, bool)
            or not isinstance(self.depth_limit, int)
            or self.depth_limit < 0
        ):
            raise InvalidDepthError(self.depth_limit)
        # Fail on a malformed root path before any input is read.
        parse_path(self.root)

    @property
    def root_segments(self) -> tuple[PathSegment, ...]:
        return parse_path(self.root)


def resolve_root(raw: str | None) -> str | None:
    """Pass the root path through; empty means the document root."""
    return raw or None


def parse_depth(raw: str | None) -> int:
    """Resolve a raw depth value.

    Args:
        raw: ``None`` when the option was not given, else the raw string.

    Returns:
        0 (unlimited) for ``None``, else the parsed non-negative integer.

    Raises:
        InvalidDepthError: If ``raw`` is not a non-negative base-10 integer.
    """
    if raw is None:
        return 0
    text = raw.strip()
    if not _DEPTH.fullmatch(text):
        raise InvalidDepthError(raw)
    return int(text)


def resolve_excluded_key(raw: str | None) -> str | None:
    """Pass the excluded key through; empty means no exclusion."""
    return raw or None


def resolve_options(
    root: str | None = None,
    depth: str | None = None,
    exclude: str | None = None,
) -> AnalysisOptions:
    """Build ``AnalysisOptions`` from raw, optional string values."""
    return AnalysisOptions(
        root=resolve_root(root),
        depth_limit=parse_depth(depth),
        excluded_key=resolve_excluded_key(exclude),
    )


def select_method(view: bool, count: bool) -> AnalysisMethod:
    """Return the single selected analysis method.

    Raises:
        MissingAnalysisMethodError: If neither flag is set.
        DuplicateAnalysisMethodError: If both flags are set.
    """
    selected = [
        method
        for method, flag in ((AnalysisMethod.VIEW, view), (AnalysisMethod.COUNT, count))
        if flag
    ]
    if not selected:
        raise MissingAnalysisMethodError()
    if len(selected) > 1:
        raise DuplicateAnalysisMethodError()
    return selected[0]
