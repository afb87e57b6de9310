from __future__ import annotations

import pytest

from drag_engine.actions import EditSession
from drag_engine.buffer import BufferValidationError


def make_session(text: str = "one\ntwo\nthree\n", point: int = 0) -> EditSession:
    return EditSession(text, point=point)


def test_line_numbers_are_one_based() -> None:
    session = make_session()

    assert session.line_number_at_pos(0) == 1
    assert session.line_number_at_pos(4) == 2
    assert session.line_number_at_pos(len(session.text)) == 4


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", 1), ("a", 1), ("a\n", 2), ("a\nb", 2), ("a\nb\nc\n", 4), ("\n\n", 3)],
)
def test_count_lines_includes_line_after_trailing_newline(
    text: str, expected: int
) -> None:
    assert EditSession(text).count_lines() == expected


def test_line_positions_and_column() -> None:
    session = make_session(point=6)

    assert session.line_beginning_position() == 4
    assert session.line_end_position() == 7
    assert session.current_column() == 2


def test_forward_line_stops_at_buffer_edges() -> None:
    session = make_session(point=5)

    assert session.forward_line(1) == 0
    assert session.point == 8
    assert session.forward_line(5) == 4
    assert session.point == len(session.text)
    assert session.forward_line(-10) == 7
    assert session.point == 0


def test_forward_line_zero_goes_to_line_start() -> None:
    session = make_session(point=10)

    session.forward_line(0)

    assert session.point == 8


def test_goto_line_and_move_to_column_clamps() -> None:
    session = make_session()

    session.goto_line(2)
    assert session.point == 4
    assert session.move_to_column(10) == 7


def test_delete_region_collapses_point_and_mark() -> None:
    session = EditSession("abcdef", point=3, mark=5)

    removed = session.delete_region(4, 1)

    assert removed == "bcd"
    assert session.text == "aef"
    assert session.point == 1
    assert session.mark == 2


def test_insert_at_mark_leaves_mark_in_place() -> None:
    session = EditSession("abc", point=1, mark=1)

    session.insert("XY")

    assert session.text == "aXYbc"
    assert session.point == 3
    assert session.mark == 1


def test_delete_char_helpers() -> None:
    session = EditSession("a\nb", point=1)

    assert session.delete_char() == "\n"
    assert session.backward_delete_char() == "a"
    assert session.text == "b"
    assert session.point == 0


def test_out_of_range_point_is_rejected() -> None:
    with pytest.raises(BufferValidationError):
        EditSession("abc", point=4)
