"""Drag operations over plain text and absolute offsets."""

from .boundary import (
    can_drag_line_down,
    can_drag_line_up,
    can_drag_region_left,
    can_drag_region_right,
)
from .editing import EditSession
from .horizontal import drag_region_horizontally, drag_word_horizontally
from .results import DragOutcome, DragResult, Rejected, RejectionKind
from .vertical import drag_line_vertically, drag_region_lines_vertically

__all__ = [
    "EditSession",
    "DragOutcome",
    "DragResult",
    "Rejected",
    "RejectionKind",
    "can_drag_line_up",
    "can_drag_line_down",
    "can_drag_region_left",
    "can_drag_region_right",
    "drag_line_vertically",
    "drag_region_lines_vertically",
    "drag_region_horizontally",
    "drag_word_horizontally",
]
