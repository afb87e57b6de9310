from __future__ import annotations

import pytest

from drag_engine.actions import (
    DragOutcome,
    Rejected,
    RejectionKind,
    drag_region_horizontally,
    drag_word_horizontally,
)
from drag_engine.words import SyntaxWordProvider


def outcome(result) -> DragOutcome:
    assert isinstance(result, DragOutcome), result
    return result


def test_region_right_then_left_round_trip() -> None:
    right = outcome(drag_region_horizontally("hello world", 0, 5, 1))
    assert right.text == " helloworld"
    assert (right.mark, right.point) == (1, 6)

    left = outcome(drag_region_horizontally(right.text, right.mark, right.point, -1))
    assert left.text == "hello world"
    assert (left.mark, left.point) == (0, 5)


def test_region_keeps_point_mark_order() -> None:
    result = outcome(drag_region_horizontally("hello world", 5, 0, 2))

    assert result.text == " whelloorld"
    assert (result.mark, result.point) == (7, 2)


@pytest.mark.parametrize(
    ("mark", "point", "delta", "side"),
    [(1, 2, -5, "left"), (1, 3, -2, "left"), (4, 2, 3, "right")],
)
def test_region_delta_past_edge_is_rejected(
    mark: int, point: int, delta: int, side: str
) -> None:
    result = drag_region_horizontally("abcdef", mark, point, delta)

    assert isinstance(result, Rejected)
    assert result.reason == f"Can not move region further to the {side}"


@pytest.mark.parametrize(
    ("text", "mark", "point", "delta"),
    [("abcdef", 1, 3, -1), ("abcdef", 3, 1, 2), ("hello world", 6, 11, -3)],
)
def test_region_drag_then_reverse_restores_buffer(
    text: str, mark: int, point: int, delta: int
) -> None:
    there = outcome(drag_region_horizontally(text, mark, point, delta))
    back = outcome(
        drag_region_horizontally(there.text, there.mark, there.point, -delta)
    )

    assert back.text == text
    assert (back.mark, back.point) == (mark, point)
    assert (there.mark, there.point) == (mark + delta, point + delta)


@pytest.mark.parametrize(
    ("mark", "point", "delta", "side"),
    [(0, 3, -1, "left"), (3, 0, -2, "left"), (1, 3, 1, "right"), (3, 2, 4, "right")],
)
def test_region_rejected_at_edges(mark: int, point: int, delta: int, side: str) -> None:
    result = drag_region_horizontally("abc", mark, point, delta)

    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.BOUNDARY_EXCEEDED
    assert result.reason == f"Can not move region further to the {side}"


def test_word_right_keeps_cursor_inside_word() -> None:
    result = outcome(drag_word_horizontally("foo bar baz", 5, 1))

    assert result.text == "foo baz bar"
    assert result.point == 9


def test_word_left_undoes_word_right() -> None:
    result = outcome(drag_word_horizontally("foo baz bar", 9, -1))

    assert result.text == "foo bar baz"
    assert result.point == 5


def test_word_drag_by_two() -> None:
    result = outcome(drag_word_horizontally("one two three four", 1, 2))

    assert result.text == "two three one four"
    assert result.point == 11


def test_word_drag_skips_punctuation() -> None:
    result = outcome(drag_word_horizontally("foo, bar", 1, 1))

    assert result.text == "bar, foo"
    assert result.point == 6


def test_word_drag_respects_extra_word_chars() -> None:
    plain = outcome(drag_word_horizontally("foo_bar baz", 1, 1))
    joined = outcome(
        drag_word_horizontally("foo_bar baz", 1, 1, SyntaxWordProvider("_"))
    )

    assert (plain.text, plain.point) == ("bar_foo baz", 5)
    assert (joined.text, joined.point) == ("baz foo_bar", 5)


@pytest.mark.parametrize(
    ("point", "delta", "side"),
    [(9, 1, "right"), (11, 1, "right"), (1, -1, "left"), (0, -2, "left")],
)
def test_word_rejected_without_neighbour(point: int, delta: int, side: str) -> None:
    result = drag_word_horizontally("foo bar baz", point, delta)

    assert isinstance(result, Rejected)
    assert result.kind is RejectionKind.WORD_TRANSPOSITION_FAILED
    assert result.reason == f"Can not move word further to the {side}"
