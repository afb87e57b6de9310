"""Boundary types for exchanging buffer state with a host editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Cursor, Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of text, cursor and selection."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How a host hands its buffer to the engine and takes edits back."""

    def pull_buffer(self) -> BufferMirror:
        """Return the host's current text, cursor and selection."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Apply the engine's result to the host widget."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller supplies an out-of-range cursor or offset."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Cursor | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.offset = offset
