from __future__ import annotations

import pytest

from drag_engine.buffer import (
    Buffer,
    BufferDocument,
    BufferMirror,
    BufferValidationError,
)


def test_document_keeps_trailing_newline() -> None:
    document = BufferDocument.from_text("a\nb\nc\n")

    assert document.line_count == 4
    assert document.text() == "a\nb\nc\n"
    assert document.length == 6


def test_document_does_not_split_on_carriage_return() -> None:
    document = BufferDocument.from_text("a\rb\nc")

    assert document.snapshot() == ("a\rb", "c")


def test_offsets_and_cursors_convert_both_ways() -> None:
    buffer = Buffer.from_text("ab\ncde\n")

    assert buffer.offset_of((1, 2)) == 5
    assert buffer.cursor_at(5) == (1, 2)
    assert buffer.cursor_at(7) == (2, 0)


def test_from_text_with_mark_activates_selection() -> None:
    buffer = Buffer.from_text("ab\ncd", cursor=(1, 1), mark=(0, 1))

    assert buffer.state.selection == ((0, 1), (1, 1))
    assert buffer.selection_offsets() == (1, 4)
    assert buffer.point == 4


def test_invalid_cursor_raises() -> None:
    with pytest.raises(BufferValidationError) as excinfo:
        Buffer.from_text("ab", cursor=(3, 0))

    assert excinfo.value.cursor == (3, 0)


def test_apply_edit_records_undo_and_redo() -> None:
    buffer = Buffer.from_text("a\nb", cursor=(1, 0))

    delta = buffer.apply_edit("b\na", point=0, label="drag_line")

    assert delta.cursor == (0, 0)
    assert len(buffer.undo) == 1
    assert buffer.undo.latest().label == "drag_line"

    undone = buffer.undo_last()
    assert undone is not None
    assert buffer.text == "a\nb"
    assert buffer.state.cursor == (1, 0)

    redone = buffer.redo_last()
    assert redone is not None
    assert buffer.text == "b\na"
    assert buffer.state.cursor == (0, 0)
    assert buffer.redo_last() is None


def test_apply_edit_with_mark_sets_selection() -> None:
    buffer = Buffer.from_text("hello world")

    buffer.apply_edit(" helloworld", point=6, mark=1, label="drag_region")

    assert buffer.state.selection == ((0, 1), (0, 6))
    assert buffer.state.cursor == (0, 6)


def test_apply_edit_rejects_bad_offset() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferValidationError):
        buffer.apply_edit("abc", point=9, label="broken")
    assert len(buffer.undo) == 0


def test_undo_on_empty_history_returns_none() -> None:
    assert Buffer.from_text("abc").undo_last() is None


def test_mirror_round_trip() -> None:
    buffer = Buffer.from_text("x\ny")
    mirror = BufferMirror(text="one\ntwo", cursor=(1, 2), selection=((0, 0), (1, 2)))

    buffer.load_mirror(mirror)
    snapshot = buffer.mirror(attributes={"host": "test"})

    assert snapshot.text == "one\ntwo"
    assert snapshot.cursor == (1, 2)
    assert snapshot.selection == ((0, 0), (1, 2))
    assert snapshot.attributes == {"host": "test"}


def test_undo_and_redo_restore_selection() -> None:
    buffer = Buffer.from_text("hello world", cursor=(0, 5), mark=(0, 0))
    buffer.apply_edit(" helloworld", point=6, mark=1, label="drag_region")

    undone = buffer.undo_last()

    assert undone is not None and undone.selection == ((0, 0), (0, 5))
    assert buffer.state.selection == ((0, 0), (0, 5))
    assert buffer.state.cursor == (0, 5)

    buffer.redo_last()

    assert buffer.state.selection == ((0, 1), (0, 6))
    assert buffer.state.cursor == (0, 6)
