"""TypeCategory StrEnum and the token-kind classifier.

The seven categories form a closed enumeration whose member values are the
display names printed by the analysis strategies.  Iteration order is the
fixed report order used by the Count strategy.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = ["CONTAINER_KINDS", "TypeCategory", "classify", "display_name"]


class TypeCategory(StrEnum):
    """Semantic category of a JSON value.

    - UNKNOWN -> "???"     : catch-all for unrecognised token kinds
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : integers and floating-point numbers
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    UNKNOWN = "???"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


# ijson event name of a value's first event -> category.  ijson 3 reports all
# numbers as "number"; the yajl backends of older releases split them into
# "integer" and "double".
_KIND_TO_CATEGORY: dict[str, TypeCategory] = {
    "start_map": TypeCategory.OBJECT,
    "start_array": TypeCategory.ARRAY,
    "integer": TypeCategory.NUMBER,
    "double": TypeCategory.NUMBER,
    "number": TypeCategory.NUMBER,
    "string": TypeCategory.STRING,
    "boolean": TypeCategory.BOOLEAN,
    "null": TypeCategory.NULL,
}

CONTAINER_KINDS: frozenset[str] = frozenset({"start_map", "start_array"})


def classify(token_kind: str | None) -> TypeCategory:
    """Map a raw token kind to its category; unknown kinds map to UNKNOWN."""
    if token_kind is None:
        return TypeCategory.UNKNOWN
    return _KIND_TO_CATEGORY.get(token_kind, TypeCategory.UNKNOWN)


def display_name(category: TypeCategory) -> str:
    """Return the fixed display name of ``category``."""
    return category.value
