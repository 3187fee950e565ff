"""Exception taxonomy for json-inspector.

Every error raised on purpose by the package derives from
``JsonInspectorError`` so the CLI can catch them in a single place:

- ``ConfigurationError`` and its subclasses are detected before any traversal
  starts (bad depth, bad root path syntax, missing or duplicate analysis
  method, unusable input path).
- ``RootNotFoundError`` is raised when the configured root path does not
  resolve to a node of the document.
- ``ParseError`` wraps malformed-JSON failures reported by ijson.

I/O failures are not wrapped: they surface as the builtin ``OSError``.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DuplicateAnalysisMethodError",
    "InputPathError",
    "InvalidDepthError",
    "InvalidRootPathError",
    "JsonInspectorError",
    "MissingAnalysisMethodError",
    "ParseError",
    "RootNotFoundError",
]


class JsonInspectorError(Exception):
    """Base class for all json-inspector errors."""


class ConfigurationError(JsonInspectorError):
    """Invalid configuration, detected before traversal begins."""


class InvalidDepthError(ConfigurationError):
    """The recursion depth is not a non-negative integer.

    Attributes:
        value: The offending raw value, exactly as supplied.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        msg = f"invalid depth {value!r}: expected a non-negative integer"
        super().__init__(msg)


class InvalidRootPathError(ConfigurationError):
    """The root path cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        msg = f"invalid root path {path!r}: {reason}"
        super().__init__(msg)


class MissingAnalysisMethodError(ConfigurationError):
    """Neither view nor count mode was selected."""

    def __init__(self) -> None:
        super().__init__("no analysis method selected (use --view or --count)")


class DuplicateAnalysisMethodError(ConfigurationError):
    """More than one analysis method was selected."""

    def __init__(self) -> None:
        super().__init__("only one analysis method may be selected at a time")


class InputPathError(ConfigurationError):
    """The input path is missing, does not exist or is not a regular file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        msg = f"{reason}: {path}" if path else reason
        super().__init__(msg)


class RootNotFoundError(JsonInspectorError):
    """The configured root path does not resolve to a node."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"root not found: {path}")


class ParseError(JsonInspectorError):
    """The input is not well-formed JSON."""
