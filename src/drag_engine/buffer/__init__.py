"""Buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror, BufferSync, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset

__all__ = [
    "BufferDocument",
    "BufferState",
    "Cursor",
    "Selection",
    "UndoTimeline",
    "UndoEntry",
    "Buffer",
    "BufferDelta",
    "Transaction",
    "BufferMirror",
    "BufferSync",
    "BufferValidationError",
    "ensure_cursor",
    "ensure_offset",
]
