"""Horizontal drags: a selected character run, or the word at point."""

from __future__ import annotations

from typing import Optional

from drag_engine.words import (
    SyntaxWordProvider,
    TranspositionError,
    WordBoundaryProvider,
    transpose_words,
)

from .boundary import check_horizontal
from .editing import EditSession
from .results import DragOutcome, DragResult, Rejected, RejectionKind


def drag_region_horizontally(
    text: str, mark: int, point: int, delta: int
) -> DragResult:
    """Slide the text between ``mark`` and ``point`` by ``delta`` characters.

    The selection is not widened to lines; a run containing a newline is
    moved as-is. A ``delta`` reaching past either buffer edge is rejected, so
    both ends of the selection always shift by exactly ``delta``.
    """

    session = EditSession(text, point=point, mark=mark)
    if delta == 0:
        return DragOutcome(text=text, point=point, mark=mark)

    rejection = check_horizontal(mark, point, session.point_max, delta)
    if rejection is not None:
        return rejection

    region = session.substring(mark, point)
    session.delete_region(mark, point)
    session.forward_char(delta)
    session.insert(region)
    return DragOutcome(text=session.text, point=point + delta, mark=mark + delta)


def drag_word_horizontally(
    text: str,
    point: int,
    delta: int,
    words: Optional[WordBoundaryProvider] = None,
) -> DragResult:
    session = EditSession(text, point=point)
    if delta == 0:
        return DragOutcome(text=text, point=point)

    words = words or SyntaxWordProvider()
    # Distance to the end of the word, so point can be put back inside it.
    offset = words.forward_word(text, point) - point
    try:
        swapped, word_end = transpose_words(text, point, delta, words)
    except TranspositionError:
        side = "right" if delta > 0 else "left"
        return Rejected(
            kind=RejectionKind.WORD_TRANSPOSITION_FAILED,
            reason=f"Can not move word further to the {side}",
        )

    session.text = swapped
    session.goto_char(word_end)
    session.forward_char(-offset)
    return DragOutcome(text=session.text, point=session.point)


__all__ = ["drag_region_horizontally", "drag_word_horizontally"]
