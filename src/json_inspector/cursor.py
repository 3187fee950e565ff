"""JsonCursor: a pull-based, position-aware cursor over ijson parse events.

The cursor wraps ``ijson.basic_parse`` and exposes the document one node at a
time without materializing it.  It is always positioned on exactly one node
and keeps a stack of the containers it has entered:

- ``next_sibling()`` moves to the next child of the innermost entered
  container, skipping the contents of the previous child if it was a
  container that was never entered.
- ``enter()`` descends into the current node when it is a container.
- ``leave()`` drains whatever is left of the innermost container and returns
  to it.
- ``find()`` walks a sequence of path segments from the current node.

Every successful ``enter()`` must be paired with exactly one ``leave()``;
``descended()`` wraps the pair in a context manager.

Example::

    cursor = JsonCursor.from_bytes(b'{"a": 1, "b": {"c": 2}}')
    with cursor.descended():
        while cursor.next_sibling():
            print(cursor.key, cursor.category)   # a number / b object
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any, cast

import ijson

from json_inspector.categories import CONTAINER_KINDS, TypeCategory, classify
from json_inspector.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from json_inspector.paths import PathSegment

__all__ = ["JsonCursor"]

logger = logging.getLogger(__name__)

_START_EVENTS = frozenset({"start_map", "start_array"})
_END_EVENTS = frozenset({"end_map", "end_array"})


@dataclass(slots=True)
class _Frame:
    """An entered container, remembered so ``leave()`` can return to it."""

    kind: str
    key: str | None
    index: int | None
    children: int = 0
    exhausted: bool = False


class JsonCursor:
    """Streaming cursor over a single JSON document.

    Args:
        source: A binary file object (or any input ``ijson.basic_parse``
            accepts).  The cursor reads it lazily and never closes it.
        backend: An ijson backend module, as returned by
            ``ijson.get_backend()``.  Defaults to the one ijson selects.

    Raises:
        ParseError: On malformed JSON, including an empty document.  Raised
            from the constructor when the first token is invalid, otherwise
            from whichever operation reads the offending token.
    """

    def __init__(self, source: IO[bytes] | Any, backend: Any = None) -> None:
        parser = backend if backend is not None else ijson
        self._events: Iterator[tuple[str, Any]] = iter(parser.basic_parse(source))
        self._frames: list[_Frame] = []
        self._key: str | None = None
        self._index: int | None = None
        self._kind: str | None = self._read()[0]
        # True while the current node is a container whose start event has
        # been consumed but whose contents have been neither entered nor skipped.
        self._unread: bool = self._kind in CONTAINER_KINDS

    @classmethod
    def from_bytes(cls, data: bytes, backend: Any = None) -> JsonCursor:
        """Build a cursor over an in-memory document."""
        return cls(io.BytesIO(data), backend)

    # ------------------------------------------------------------------
    # Current node
    # ------------------------------------------------------------------

    @property
    def kind(self) -> str | None:
        """Raw token kind (ijson event name) of the current node."""
        return self._kind

    @property
    def key(self) -> str | None:
        """Object member name of the current node; ``None`` outside objects."""
        return self._key

    @property
    def index(self) -> int | None:
        """Position of the current node within its container."""
        return self._index

    @property
    def category(self) -> TypeCategory:
        return classify(self._kind)

    @property
    def is_container(self) -> bool:
        return self._kind in CONTAINER_KINDS

    @property
    def depth(self) -> int:
        """Number of containers currently entered."""
        return len(self._frames)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def next_sibling(self) -> bool:
        """Advance to the next child of the innermost entered container.

        Returns:
            True when positioned on a new child; False once the container is
            exhausted, or when no container has been entered.
        """
        if not self._frames:
            return False
        frame = self._frames[-1]
        if frame.exhausted:
            return False
        if self._unread:
            self._skip_contents()

        event, value = self._read()
        key: str | None = None
        if event in _END_EVENTS:
            frame.exhausted = True
            return False
        if event == "map_key":
            key = value
            event, value = self._read()

        self._kind = event
        self._key = key
        self._index = frame.children
        self._unread = event in CONTAINER_KINDS
        frame.children += 1
        return True

    def enter(self) -> bool:
        """Descend into the current node.

        Returns:
            False, without changing state, when the current node is not a
            container or its contents were already consumed.
        """
        if not self._unread:
            return False
        # _unread is only ever set for container kinds.
        self._frames.append(_Frame(cast(str, self._kind), self._key, self._index))
        self._unread = False
        return True

    def leave(self) -> None:
        """Return to the innermost entered container, draining its remainder.

        Raises:
            RuntimeError: If no container is currently entered.
        """
        if not self._frames:
            msg = "leave() called without a matching enter()"
            raise RuntimeError(msg)
        frame = self._frames.pop()
        if not frame.exhausted:
            if self._unread:
                self._skip_contents()
            self._skip_contents()
        self._kind = frame.kind
        self._key = frame.key
        self._index = frame.index
        self._unread = False

    @contextmanager
    def descended(self) -> Iterator[bool]:
        """Enter the current node for the duration of a ``with`` block.

        Yields whether the descent happened.  The matching ``leave()`` runs on
        normal exit; if the block raises, the entered frames are dropped
        without reading any further input.
        """
        mark = len(self._frames)
        if not self.enter():
            yield False
            return
        try:
            yield True
        except BaseException:
            del self._frames[mark:]
            raise
        while len(self._frames) > mark:
            self.leave()

    def find(self, segments: tuple[PathSegment, ...]) -> bool:
        """Move to the descendant addressed by ``segments``.

        String segments match object keys; integer segments and all-digit
        string segments match array indices.  Containers along the way are
        left entered, so the cursor ends up positioned on the target node.

        Returns:
            False as soon as a segment does not resolve.
        """
        for segment in segments:
            if not self.enter():
                logger.debug("Cannot descend into %s node", self.category)
                return False
            container = self._frames[-1].kind
            while True:
                if not self.next_sibling():
                    logger.debug("No child matches segment %r", segment)
                    return False
                if self._matches(container, segment):
                    break
        return True

    def expect_end(self) -> None:
        """Check that nothing but whitespace follows the document.

        Only valid once every entered container has been left.

        Raises:
            ParseError: If more input follows the root value.
            RuntimeError: If a container is still entered.
        """
        if self._frames:
            msg = "expect_end() called inside an entered container"
            raise RuntimeError(msg)
        if self._unread:
            self._skip_contents()
        try:
            event = next(self._events)[0]
        except StopIteration:
            return
        except (ijson.JSONError, UnicodeDecodeError) as exc:
            raise ParseError(_describe(exc)) from exc
        msg = f"unexpected {event} after end of JSON document"
        raise ParseError(msg)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _matches(self, container: str, segment: PathSegment) -> bool:
        if container == "start_map":
            return self._key == str(segment)
        if isinstance(segment, int):
            return self._index == segment
        return segment.isascii() and segment.isdigit() and self._index == int(segment)

    def _skip_contents(self) -> None:
        """Consume events up to the end of a container whose start was read."""
        level = 1
        while level:
            event = self._read()[0]
            if event in _START_EVENTS:
                level += 1
            elif event in _END_EVENTS:
                level -= 1
        self._unread = False

    def _read(self) -> tuple[str, Any]:
        try:
            return next(self._events)
        except StopIteration:
            msg = "unexpected end of JSON document"
            raise ParseError(msg) from None
        except (ijson.JSONError, UnicodeDecodeError) as exc:
            raise ParseError(_describe(exc)) from exc


def _describe(exc: Exception) -> str:
    """Reduce a parser error to its first non-blank line.

    The yajl backends report bytes messages followed by a context excerpt and
    a ``(right here) ------^`` marker line.
    """
    detail: Any = exc.args[0] if exc.args else exc
    if isinstance(detail, bytes):
        detail = detail.decode("utf-8", errors="replace")
    for line in str(detail).splitlines():
        if line.strip():
            return line.strip()
    return type(exc).__name__
