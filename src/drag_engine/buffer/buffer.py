"""Buffer façade combining document, cursor/selection state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Tuple

from drag_engine.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.undo = undo or UndoTimeline()

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        cursor: Cursor = (0, 0),
        mark: Optional[Cursor] = None,
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        cursor = ensure_cursor(buffer.document, cursor)
        if mark is None:
            buffer.state.set_cursor(*cursor)
        else:
            buffer.state.set_selection(ensure_cursor(buffer.document, mark), cursor)
        return buffer

    @property
    def text(self) -> str:
        return self.document.text()

    def offset_of(self, cursor: Cursor) -> int:
        return _offset_for_cursor(self.document, ensure_cursor(self.document, cursor))

    def cursor_at(self, offset: int) -> Cursor:
        return _cursor_from_offset(self.document, ensure_offset(self.text, offset))

    @property
    def point(self) -> int:
        return self.offset_of(self.state.cursor)

    def selection_offsets(self) -> Optional[Tuple[int, int]]:
        """Return ``(mark, point)`` as absolute offsets, or ``None``."""

        selection = self.state.selection
        if selection is None:
            return None
        mark, point = selection
        return self.offset_of(mark), self.offset_of(point)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            attributes=dict(attributes or {}),
        )

    def load_mirror(self, mirror: BufferMirror) -> None:
        """Replace text, cursor and selection with a host snapshot."""

        self.document = self.document.replace_text(mirror.text)
        cursor = ensure_cursor(self.document, mirror.cursor)
        if mirror.selection is None:
            self.state.clear_selection()
            self.state.set_cursor(*cursor)
        else:
            mark, point = mirror.selection
            self.state.set_selection(
                ensure_cursor(self.document, mark), ensure_cursor(self.document, point)
            )

    def apply_edit(
        self,
        text: str,
        *,
        point: int,
        mark: Optional[int] = None,
        label: str,
    ) -> BufferDelta:
        """Swap in ``text`` and place the cursor (and selection) by offset.

        With ``mark`` given the selection becomes ``(mark, point)``; without
        it any active selection is dropped.
        """

        ensure_offset(text, point)
        if mark is not None:
            ensure_offset(text, mark)
        with Transaction(self, label) as tx:
            before_text = self.text
            cursor_before = self.state.cursor
            selection_before = self.state.selection
            self.document = self.document.replace_text(text)
            cursor = _cursor_from_offset(self.document, point)
            if mark is None:
                self.state.clear_selection()
                self.state.set_cursor(*cursor)
            else:
                self.state.set_selection(
                    _cursor_from_offset(self.document, mark), cursor
                )
            self.state.last_change_tick = self.document.version
            tx.commit(
                UndoEntry(
                    label=label,
                    before_text=before_text,
                    after_text=text,
                    cursor_before=cursor_before,
                    cursor_after=self.state.cursor,
                    selection_before=selection_before,
                    selection_after=self.state.selection,
                )
            )

        return BufferDelta(
            version=self.document.version,
            text=text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            label=label,
        )

    def undo_last(self) -> Optional[BufferDelta]:
        entry = self.undo.undo()
        if entry is None:
            return None
        return self._restore(
            entry.before_text,
            entry.cursor_before,
            entry.selection_before,
            f"undo::{entry.label}",
        )

    def redo_last(self) -> Optional[BufferDelta]:
        entry = self.undo.redo()
        if entry is None:
            return None
        return self._restore(
            entry.after_text,
            entry.cursor_after,
            entry.selection_after,
            f"redo::{entry.label}",
        )

    def _restore(
        self,
        text: str,
        cursor: Cursor,
        selection: Optional[Selection],
        label: str,
    ) -> BufferDelta:
        with telemetry.span(
            name=f"buffer::{label}",
            component=True,
            metadata={"buffer": self.name},
        ):
            self.document = self.document.replace_text(text)
            if selection is None:
                self.state.clear_selection()
                self.state.set_cursor(*cursor)
            else:
                self.state.set_selection(*selection)
            self.state.last_change_tick = self.document.version
        return BufferDelta(
            version=self.document.version,
            text=text,
            cursor=cursor,
            selection=selection,
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around one edit, recording it on the undo timeline."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._entry: UndoEntry | None = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, entry: UndoEntry) -> None:
        self._entry = entry

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self._entry is not None:
            self.buffer.undo.push(self._entry)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    return offset + col


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    lines = document.snapshot()
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))
