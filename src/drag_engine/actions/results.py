"""Values returned by drag operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class RejectionKind(str, Enum):
    BOUNDARY_EXCEEDED = "boundary_exceeded"
    WORD_TRANSPOSITION_FAILED = "word_transposition_failed"


@dataclass(frozen=True, slots=True)
class DragOutcome:
    """New buffer text plus where point (and mark, for regions) ended up."""

    text: str
    point: int
    mark: Optional[int] = None

    applied: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Rejected:
    """A drag that was refused before touching the buffer."""

    kind: RejectionKind
    reason: str

    applied: ClassVar[bool] = False


DragResult = Union[DragOutcome, Rejected]

__all__ = ["DragOutcome", "DragResult", "Rejected", "RejectionKind"]
