"""Vertical drags: the current line, or every line a selection touches.

Both variants splice a whole-line slice out of the buffer and reinsert it
``delta`` lines away in a single step. The splice removes the newline on the
far side of the slice (before it when moving up, after it when moving down)
and reinserts exactly one, so the buffer's newline count never changes.
"""

from __future__ import annotations

from typing import Tuple

from .boundary import check_vertical
from .editing import EditSession
from .results import DragOutcome, DragResult


def drag_region_up(session: EditSession, beg: int, end: int, delta: int) -> None:
    """Move ``beg``..``end`` up by ``-delta`` lines; point lands on its first line."""

    region = session.substring(beg, end)
    session.delete_region(beg, end)
    session.goto_char(beg)
    session.backward_delete_char(1)
    session.forward_line(delta + 1)
    session.goto_char(session.line_beginning_position())
    session.insert(region)
    session.newline()
    session.forward_line(-1)


def drag_region_down(session: EditSession, beg: int, end: int, delta: int) -> None:
    """Move ``beg``..``end`` down by ``delta`` lines; point lands after it."""

    region = session.substring(beg, end)
    session.delete_region(beg, end)
    session.goto_char(beg)
    session.delete_char(1)
    session.forward_line(delta - 1)
    session.goto_char(session.line_end_position())
    session.newline()
    session.insert(region)


def _splice(session: EditSession, beg: int, end: int, delta: int) -> None:
    if delta < 0:
        drag_region_up(session, beg, end, delta)
    else:
        drag_region_down(session, beg, end, delta)


def whole_lines_region(session: EditSession, mark: int, point: int) -> Tuple[int, int]:
    """Widen ``mark``/``point`` to full lines, whichever order they come in."""

    first, last = min(mark, point), max(mark, point)
    return session.line_beginning_position(first), session.line_end_position(last)


def drag_line_vertically(text: str, point: int, delta: int) -> DragResult:
    session = EditSession(text, point=point)
    if delta == 0:
        return DragOutcome(text=text, point=session.point)

    line = session.line_number_at_pos()
    rejection = check_vertical(
        "line",
        first_line=line,
        last_line=line,
        total_lines=session.count_lines(),
        delta=delta,
    )
    if rejection is not None:
        return rejection

    column = session.current_column()
    beg = session.line_beginning_position()
    end = session.line_end_position()
    _splice(session, beg, end, delta)
    session.move_to_column(column)
    return DragOutcome(text=session.text, point=session.point)


def drag_region_lines_vertically(
    text: str, mark: int, point: int, delta: int
) -> DragResult:
    """Drag every line the selection touches, keeping mark and point on their text.

    Each endpoint keeps its own column and shifts by ``delta`` lines, so a
    selection running backwards or ending mid-line survives unchanged.
    """

    session = EditSession(text, point=point, mark=mark)
    if delta == 0:
        return DragOutcome(text=text, point=point, mark=mark)

    rejection = check_vertical(
        "lines",
        first_line=session.line_number_at_pos(min(mark, point)),
        last_line=session.line_number_at_pos(max(mark, point)),
        total_lines=session.count_lines(),
        delta=delta,
    )
    if rejection is not None:
        return rejection

    mark_line = session.line_number_at_pos(mark)
    point_line = session.line_number_at_pos(point)
    mark_col = session.current_column(mark)
    point_col = session.current_column(point)
    beg, end = whole_lines_region(session, mark, point)

    _splice(session, beg, end, delta)

    session.goto_line(mark_line)
    session.forward_line(delta)
    new_mark = session.move_to_column(mark_col)
    session.goto_line(point_line)
    session.forward_line(delta)
    new_point = session.move_to_column(point_col)
    return DragOutcome(text=session.text, point=new_point, mark=new_mark)


__all__ = [
    "drag_line_vertically",
    "drag_region_down",
    "drag_region_lines_vertically",
    "drag_region_up",
    "whole_lines_region",
]
