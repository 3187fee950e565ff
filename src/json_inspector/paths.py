"""Root path parsing for the ``--root`` option.

Two notations are accepted:

- JSON Pointer (RFC 6901) when the path starts with ``/``:
  ``/users/0/name``.  ``~1`` decodes to ``/`` and ``~0`` to ``~``.
- Dotted paths with optional bracket subscripts:
  ``users[0].name``, ``$.users.0.name``, ``["key.with.dots"].x``.

Segments are returned as a tuple of ``str`` (object keys, or array indices
written in dot / pointer notation) and ``int`` (bracketed array indices).
The empty path, ``None`` and ``$`` all address the document root.
"""

from __future__ import annotations

import re

from json_inspector.errors import InvalidRootPathError

__all__ = ["PathSegment", "format_path", "parse_path"]

PathSegment = str | int

_NAME = re.compile(r"[^.\[\]]+")
_INDEX = re.compile(r"\[\s*([0-9]+)\s*\]")
_QUOTED = re.compile(r"""\[\s*(?:"((?:[^"\\]|\\.)*)"|'((?:[^'\\]|\\.)*)')\s*\]""")
_ESCAPE = re.compile(r"\\(.)")


def parse_path(path: str | None) -> tuple[PathSegment, ...]:
    """Split ``path`` into segments.

    Raises:
        InvalidRootPathError: If the dotted form is malformed (empty segment,
            unterminated or malformed subscript, stray characters).
    """
    if not path:
        return ()
    if path.startswith("/"):
        return tuple(_unescape_pointer(token) for token in path[1:].split("/"))
    return _parse_dotted(path)


def format_path(segments: tuple[PathSegment, ...]) -> str:
    """Render segments back to dotted notation (``$`` for the root)."""
    if not segments:
        return "$"
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif segment and not any(ch in segment for ch in ".[]\"'") and segment != "$":
            parts.append(f".{segment}" if parts else segment)
        else:
            escaped = segment.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'["{escaped}"]')
    return "".join(parts)


def _unescape_pointer(token: str) -> str:
    # Order matters: "~01" must decode to "~1", not "/".
    return token.replace("~1", "/").replace("~0", "~")


def _parse_dotted(path: str) -> tuple[PathSegment, ...]:
    segments: list[PathSegment] = []
    pos = 0
    if path.startswith("$"):
        pos = 1
        if path.startswith("$."):
            pos = _read_name(path, 2, segments)
    elif not path.startswith("["):
        pos = _read_name(path, 0, segments)

    while pos < len(path):
        ch = path[pos]
        if ch == ".":
            pos = _read_name(path, pos + 1, segments)
        elif ch == "[":
            pos = _read_subscript(path, pos, segments)
        else:
            msg = f"unexpected {ch!r} at offset {pos}"
            raise InvalidRootPathError(path, msg)
    return tuple(segments)


def _read_name(path: str, pos: int, segments: list[PathSegment]) -> int:
    match = _NAME.match(path, pos)
    if match is None:
        msg = f"empty segment at offset {pos}"
        raise InvalidRootPathError(path, msg)
    segments.append(match.group())
    return match.end()


def _read_subscript(path: str, pos: int, segments: list[PathSegment]) -> int:
    match = _INDEX.match(path, pos)
    if match is not None:
        segments.append(int(match.group(1)))
        return match.end()
    match = _QUOTED.match(path, pos)
    if match is not None:
        raw = match.group(1) if match.group(1) is not None else match.group(2)
        segments.append(_ESCAPE.sub(r"\1", raw))
        return match.end()
    msg = f"malformed subscript at offset {pos}"
    raise InvalidRootPathError(path, msg)
