"""Point/mark editing primitives over a plain string.

Offsets are 0-based and line numbers 1-based. Deleting or inserting text
shifts ``point`` and ``mark`` the way editor markers move: positions inside
a deleted span collapse onto its start, and an insertion at the mark leaves
the mark before the inserted text.
"""

from __future__ import annotations

from typing import Optional

from drag_engine.buffer import ensure_offset


class EditSession:
    def __init__(
        self, text: str, *, point: int = 0, mark: Optional[int] = None
    ) -> None:
        self.text = text
        self.point = ensure_offset(text, point)
        self.mark = None if mark is None else ensure_offset(text, mark)

    @property
    def point_max(self) -> int:
        return len(self.text)

    def goto_char(self, pos: int) -> int:
        self.point = max(0, min(pos, self.point_max))
        return self.point

    def substring(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        return self.text[start:end]

    def line_number_at_pos(self, pos: Optional[int] = None) -> int:
        pos = self.point if pos is None else pos
        return self.text.count("\n", 0, pos) + 1

    def count_lines(self) -> int:
        """Lines in the buffer, counting the empty one after a trailing newline."""

        return self.text.count("\n") + 1

    def line_beginning_position(self, pos: Optional[int] = None) -> int:
        pos = self.point if pos is None else pos
        return self.text.rfind("\n", 0, pos) + 1

    def line_end_position(self, pos: Optional[int] = None) -> int:
        pos = self.point if pos is None else pos
        end = self.text.find("\n", pos)
        return self.point_max if end == -1 else end

    def current_column(self, pos: Optional[int] = None) -> int:
        pos = self.point if pos is None else pos
        return pos - self.line_beginning_position(pos)

    def forward_line(self, count: int = 1) -> int:
        """Move to the start of the line ``count`` lines away.

        Stops at the buffer edge; returns how many lines could not be moved.
        """

        if count > 0:
            pos = self.point
            for moved in range(count):
                newline = self.text.find("\n", pos)
                if newline == -1:
                    self.point = self.point_max
                    return count - moved
                pos = newline + 1
            self.point = pos
            return 0

        pos = self.line_beginning_position()
        for moved in range(-count):
            if pos == 0:
                self.point = 0
                return -count - moved
            pos = self.line_beginning_position(pos - 1)
        self.point = pos
        return 0

    def goto_line(self, line: int) -> None:
        self.point = 0
        self.forward_line(line - 1)

    def move_to_column(self, column: int) -> int:
        start = self.line_beginning_position()
        end = self.line_end_position()
        self.point = min(start + max(column, 0), end)
        return self.point

    def forward_char(self, count: int = 1) -> int:
        return self.goto_char(self.point + count)

    def insert(self, fragment: str) -> None:
        at = self.point
        self.text = self.text[:at] + fragment + self.text[at:]
        self.point = at + len(fragment)
        if self.mark is not None and self.mark > at:
            self.mark += len(fragment)

    def newline(self) -> None:
        self.insert("\n")

    def delete_region(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        removed = self.text[start:end]
        self.text = self.text[:start] + self.text[end:]
        self.point = _collapse(self.point, start, end)
        if self.mark is not None:
            self.mark = _collapse(self.mark, start, end)
        return removed

    def delete_char(self, count: int = 1) -> str:
        return self.delete_region(self.point, min(self.point + count, self.point_max))

    def backward_delete_char(self, count: int = 1) -> str:
        return self.delete_region(max(self.point - count, 0), self.point)


def _collapse(pos: int, start: int, end: int) -> int:
    if pos <= start:
        return pos
    if pos >= end:
        return pos - (end - start)
    return start


__all__ = ["EditSession"]
