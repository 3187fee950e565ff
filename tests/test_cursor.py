"""Tests for JsonCursor, the streaming cursor over ijson events.

Covers:
- Root positioning and current-node attributes
- Sibling iteration in objects and arrays, including skipping of containers
  that were never entered
- enter()/leave() pairing, draining of unread children, depth bookkeeping
- descended() context manager on success, refusal and exceptions
- find() by key, by index (int and digit string), and failure modes
- ParseError wrapping of malformed, truncated and empty input on both the
  yajl2_c and pure-python ijson backends, as single-line messages
- expect_end() acceptance of trailing whitespace and rejection of trailing data
"""

from __future__ import annotations

from typing import Any

import ijson
import pytest

from json_inspector.categories import TypeCategory
from json_inspector.cursor import JsonCursor, _describe
from json_inspector.errors import ParseError

SAMPLE = b'{"a":1,"b":{"c":2}}'


def _children(cursor: JsonCursor) -> list[tuple[str | None, TypeCategory]]:
    out = []
    while cursor.next_sibling():
        out.append((cursor.key, cursor.category))
    return out


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class TestRoot:
    def test_object_root(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.category is TypeCategory.OBJECT
        assert cursor.kind == "start_map"
        assert cursor.key is None
        assert cursor.index is None
        assert cursor.is_container
        assert cursor.depth == 0

    def test_array_root(self) -> None:
        cursor = JsonCursor.from_bytes(b"[1, 2]")
        assert cursor.category is TypeCategory.ARRAY

    def test_scalar_root_cannot_be_entered(self) -> None:
        cursor = JsonCursor.from_bytes(b"42")
        assert cursor.category is TypeCategory.NUMBER
        assert not cursor.is_container
        assert cursor.enter() is False
        assert cursor.next_sibling() is False

    def test_root_has_no_siblings(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.next_sibling() is False


# ---------------------------------------------------------------------------
# Sibling iteration
# ---------------------------------------------------------------------------


class TestNextSibling:
    def test_object_members(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.enter()
        assert _children(cursor) == [
            ("a", TypeCategory.NUMBER),
            ("b", TypeCategory.OBJECT),
        ]

    def test_array_elements_have_no_key(self) -> None:
        cursor = JsonCursor.from_bytes(b'[1, "x", null, true, [2], {}]')
        assert cursor.enter()
        assert _children(cursor) == [
            (None, TypeCategory.NUMBER),
            (None, TypeCategory.STRING),
            (None, TypeCategory.NULL),
            (None, TypeCategory.BOOLEAN),
            (None, TypeCategory.ARRAY),
            (None, TypeCategory.OBJECT),
        ]

    def test_indices(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"x": 1, "y": [], "z": 0.5}')
        cursor.enter()
        indices = []
        while cursor.next_sibling():
            indices.append(cursor.index)
        assert indices == [0, 1, 2]

    def test_unentered_containers_are_skipped(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"a": {"b": [1, {"c": 2}]}, "d": false}')
        cursor.enter()
        assert _children(cursor) == [
            ("a", TypeCategory.OBJECT),
            ("d", TypeCategory.BOOLEAN),
        ]

    def test_exhausted_stays_exhausted(self) -> None:
        cursor = JsonCursor.from_bytes(b"[1]")
        cursor.enter()
        assert cursor.next_sibling() is True
        assert cursor.next_sibling() is False
        assert cursor.next_sibling() is False

    def test_empty_containers(self) -> None:
        cursor = JsonCursor.from_bytes(b"{}")
        assert cursor.enter()
        assert cursor.next_sibling() is False

    def test_non_ascii_keys(self) -> None:
        cursor = JsonCursor.from_bytes('{"été": 1}'.encode())
        cursor.enter()
        assert cursor.next_sibling()
        assert cursor.key == "été"


# ---------------------------------------------------------------------------
# enter() / leave()
# ---------------------------------------------------------------------------


class TestEnterLeave:
    def test_enter_child_then_leave(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        cursor.enter()
        cursor.next_sibling()
        cursor.next_sibling()
        assert cursor.key == "b"
        assert cursor.enter()
        assert cursor.depth == 2
        assert _children(cursor) == [("c", TypeCategory.NUMBER)]
        cursor.leave()
        assert cursor.depth == 1
        assert cursor.key == "b"
        assert cursor.category is TypeCategory.OBJECT
        assert cursor.next_sibling() is False

    def test_leave_drains_remaining_children(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"a": {"x": 1, "y": {"z": 2}}, "b": 3}')
        cursor.enter()
        cursor.next_sibling()
        cursor.enter()
        cursor.next_sibling()
        assert cursor.key == "x"
        cursor.leave()
        assert cursor.key == "a"
        assert _children(cursor) == [("b", TypeCategory.NUMBER)]

    def test_leave_skips_unread_current_child(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"a": {"x": [1, 2]}, "b": 3}')
        cursor.enter()
        cursor.next_sibling()
        cursor.enter()
        cursor.next_sibling()
        assert cursor.category is TypeCategory.ARRAY
        cursor.leave()
        assert _children(cursor) == [("b", TypeCategory.NUMBER)]

    def test_cannot_enter_twice(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.enter() is True
        assert cursor.enter() is False
        assert cursor.depth == 1

    def test_cannot_enter_scalar(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        cursor.enter()
        cursor.next_sibling()
        assert cursor.enter() is False
        assert cursor.depth == 1

    def test_cannot_reenter_after_leave(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        cursor.enter()
        cursor.leave()
        assert cursor.enter() is False

    def test_leave_without_enter_raises(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        with pytest.raises(RuntimeError):
            cursor.leave()


class TestDescended:
    def test_yields_true_and_leaves(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        with cursor.descended() as entered:
            assert entered is True
            assert cursor.depth == 1
            cursor.next_sibling()
        assert cursor.depth == 0
        assert cursor.category is TypeCategory.OBJECT

    def test_yields_false_for_scalar(self) -> None:
        cursor = JsonCursor.from_bytes(b'"text"')
        with cursor.descended() as entered:
            assert entered is False
        assert cursor.depth == 0

    def test_leaves_nested_frames(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        with cursor.descended():
            cursor.next_sibling()
            cursor.next_sibling()
            cursor.enter()
        assert cursor.depth == 0

    def test_exception_abandons_frames(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        with pytest.raises(KeyError), cursor.descended():
            cursor.next_sibling()
            raise KeyError("boom")
        assert cursor.depth == 0


# ---------------------------------------------------------------------------
# find()
# ---------------------------------------------------------------------------


class TestFind:
    def test_empty_path_stays_put(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.find(()) is True
        assert cursor.depth == 0

    def test_nested_key(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.find(("b", "c")) is True
        assert cursor.key == "c"
        assert cursor.category is TypeCategory.NUMBER
        assert cursor.depth == 2

    def test_container_target_can_be_entered(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.find(("b",))
        assert cursor.enter()
        assert _children(cursor) == [("c", TypeCategory.NUMBER)]

    def test_int_index(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"xs": [10, {"k": true}]}')
        assert cursor.find(("xs", 1, "k"))
        assert cursor.category is TypeCategory.BOOLEAN

    def test_digit_string_index(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"xs": [10, {"k": true}]}')
        assert cursor.find(("xs", "1", "k"))
        assert cursor.key == "k"

    def test_int_matches_numeric_object_key(self) -> None:
        cursor = JsonCursor.from_bytes(b'{"0": "zero"}')
        assert cursor.find((0,))
        assert cursor.category is TypeCategory.STRING

    def test_missing_key(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.find(("b", "x")) is False

    def test_through_scalar(self) -> None:
        cursor = JsonCursor.from_bytes(SAMPLE)
        assert cursor.find(("a", "x")) is False

    def test_index_out_of_range(self) -> None:
        cursor = JsonCursor.from_bytes(b"[1, 2]")
        assert cursor.find((5,)) is False

    def test_non_digit_segment_in_array(self) -> None:
        cursor = JsonCursor.from_bytes(b"[1, 2]")
        assert cursor.find(("first",)) is False


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


def _drain(data: bytes, backend: Any = None) -> None:
    cursor = JsonCursor.from_bytes(data, backend)
    with cursor.descended():
        while cursor.next_sibling():
            cursor.enter()
    cursor.expect_end()


def _parse_error(data: bytes, backend: Any) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        _drain(data, backend)
    return exc_info.value


class TestParseErrors:
    def test_empty_document(self, ijson_backend: Any) -> None:
        with pytest.raises(ParseError):
            JsonCursor.from_bytes(b"", ijson_backend)

    def test_malformed(self, ijson_backend: Any) -> None:
        error = _parse_error(b'{"a": 1, "b": }', ijson_backend)
        assert isinstance(error.__cause__, ijson.JSONError)

    def test_truncated(self, ijson_backend: Any) -> None:
        _parse_error(b'{"a": [1, 2', ijson_backend)

    def test_not_json(self, ijson_backend: Any) -> None:
        _parse_error(b"hello world", ijson_backend)


class TestParseErrorMessages:
    @pytest.mark.parametrize(
        "data",
        [b"", b'{"a": [1, 2', b'{"a": 1, "b": }', b'["\xff\xfe"]', b"[1] [2]"],
    )
    def test_single_line_text(self, data: bytes, ijson_backend: Any) -> None:
        message = str(_parse_error(data, ijson_backend))
        assert message
        assert "\n" not in message
        assert message == message.strip()
        assert not message.startswith(("b'", 'b"'))
        assert "right here" not in message


class TestExpectEnd:
    def test_clean_end(self, ijson_backend: Any) -> None:
        _drain(b'{"a": [1, {"b": null}]}  \n', ijson_backend)

    def test_scalar_document(self, ijson_backend: Any) -> None:
        cursor = JsonCursor.from_bytes(b"42", ijson_backend)
        cursor.expect_end()

    def test_unentered_root_is_skipped(self, ijson_backend: Any) -> None:
        cursor = JsonCursor.from_bytes(b'{"a": {"b": 1}}', ijson_backend)
        cursor.expect_end()

    @pytest.mark.parametrize("tail", [b" {{{ not json", b" 1", b"]"])
    def test_trailing_data(self, tail: bytes, ijson_backend: Any) -> None:
        _parse_error(b'{"a": 1}' + tail, ijson_backend)

    def test_inside_container_raises(self) -> None:
        cursor = JsonCursor.from_bytes(b"[1]")
        cursor.enter()
        with pytest.raises(RuntimeError):
            cursor.expect_end()


class TestDescribe:
    def test_yajl_style_bytes_message(self) -> None:
        exc = ijson.JSONError(
            b"parse error: trailing garbage\n"
            b'          {"a":1} {{{ not json\n'
            b"                     (right here) ------^\n"
        )
        assert _describe(exc) == "parse error: trailing garbage"

    def test_leading_blank_lines_skipped(self) -> None:
        assert _describe(ijson.JSONError("\n  \n  lexical error\n")) == "lexical error"

    def test_no_message(self) -> None:
        assert _describe(ijson.IncompleteJSONError()) == "IncompleteJSONError"
