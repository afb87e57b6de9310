"""Legality checks run before any drag touches the buffer."""

from __future__ import annotations

from .results import Rejected, RejectionKind


def can_drag_line_up(line: int, delta: int) -> bool:
    # Strictly greater: the first legal line is |delta| + 1.
    return line > abs(delta)


def can_drag_line_down(line: int, delta: int, total_lines: int) -> bool:
    return line + delta <= total_lines


def can_drag_region_left(mark: int, point: int, buffer_start: int = 0) -> bool:
    return min(mark, point) > buffer_start


def can_drag_region_right(mark: int, point: int, buffer_end: int) -> bool:
    return max(mark, point) < buffer_end


def check_vertical(
    noun: str, *, first_line: int, last_line: int, total_lines: int, delta: int
) -> Rejected | None:
    """Return a rejection when ``first_line``..``last_line`` cannot move ``delta``."""

    if delta < 0 and not can_drag_line_up(first_line, delta):
        return boundary_rejection(f"Can not move {noun} further up")
    if delta > 0 and not can_drag_line_down(last_line, delta, total_lines):
        return boundary_rejection(f"Can not move {noun} further down")
    return None


def check_horizontal(
    mark: int, point: int, buffer_end: int, delta: int
) -> Rejected | None:
    """Reject when the region touches the edge or ``delta`` overshoots it."""

    if delta < 0 and (
        not can_drag_region_left(mark, point) or min(mark, point) + delta < 0
    ):
        return boundary_rejection("Can not move region further to the left")
    if delta > 0 and (
        not can_drag_region_right(mark, point, buffer_end)
        or max(mark, point) + delta > buffer_end
    ):
        return boundary_rejection("Can not move region further to the right")
    return None


def boundary_rejection(reason: str) -> Rejected:
    return Rejected(kind=RejectionKind.BOUNDARY_EXCEEDED, reason=reason)


__all__ = [
    "boundary_rejection",
    "can_drag_line_down",
    "can_drag_line_up",
    "can_drag_region_left",
    "can_drag_region_right",
    "check_horizontal",
    "check_vertical",
]
