"""Cursor and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]  # (mark, point)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor plus an optional active selection.

    ``selection`` stores ``(mark, point)`` in the order the user made it; the
    point half always equals ``cursor`` while a selection is active.
    """

    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None
    last_change_tick: int = 0

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, mark: Cursor, point: Cursor) -> None:
        self.selection = (mark, point)
        self.cursor = point
