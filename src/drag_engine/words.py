"""Word boundary scanning and word transposition.

Hosts with their own notion of a word (per-language syntax tables, camel
case, ...) implement ``WordBoundaryProvider``; ``SyntaxWordProvider`` is the
default and treats letters and digits as word constituents.
"""

from __future__ import annotations

from typing import Protocol, Tuple


class TranspositionError(RuntimeError):
    """Raised when there are not two distinct words to swap."""


class WordBoundaryProvider(Protocol):
    def forward_word(self, text: str, pos: int) -> int:
        """Return the end of the next word after ``pos`` (or the buffer end)."""
        ...

    def backward_word(self, text: str, pos: int) -> int:
        """Return the start of the previous word before ``pos`` (or 0)."""
        ...


class SyntaxWordProvider:
    def __init__(self, extra_word_chars: str = "") -> None:
        self.extra_word_chars = frozenset(extra_word_chars)

    def is_word_char(self, char: str) -> bool:
        return char.isalnum() or char in self.extra_word_chars

    def forward_word(self, text: str, pos: int) -> int:
        end = len(text)
        while pos < end and not self.is_word_char(text[pos]):
            pos += 1
        while pos < end and self.is_word_char(text[pos]):
            pos += 1
        return pos

    def backward_word(self, text: str, pos: int) -> int:
        while pos > 0 and not self.is_word_char(text[pos - 1]):
            pos -= 1
        while pos > 0 and self.is_word_char(text[pos - 1]):
            pos -= 1
        return pos


def move_words(words: WordBoundaryProvider, text: str, pos: int, count: int) -> int:
    """Move ``count`` words forward (negative: backward) from ``pos``."""

    step = words.forward_word if count > 0 else words.backward_word
    for _ in range(abs(count)):
        pos = step(text, pos)
    return pos


def _word_span(
    words: WordBoundaryProvider, text: str, pos: int, count: int
) -> Tuple[int, int]:
    there = move_words(words, text, pos, count)
    return there, move_words(words, text, there, -count)


def _swap_spans(text: str, first: Tuple[int, int], second: Tuple[int, int]) -> str:
    a_start, a_end = sorted(first)
    b_start, b_end = sorted(second)
    if a_start > b_start:
        a_start, a_end, b_start, b_end = b_start, b_end, a_start, a_end
    if a_end > b_start or a_start == a_end or b_start == b_end:
        raise TranspositionError("Don't have two things to transpose")
    return (
        text[:a_start]
        + text[b_start:b_end]
        + text[a_end:b_start]
        + text[a_start:a_end]
        + text[b_end:]
    )


def transpose_words(
    text: str, pos: int, count: int, words: WordBoundaryProvider
) -> Tuple[str, int]:
    """Swap the word at or before ``pos`` past ``count`` neighbouring words.

    Positive ``count`` swaps it with the next ``count`` words, negative with
    the previous ``|count|``. Returns the new text and the offset just past
    the moved word.
    """

    if count == 0:
        raise ValueError("count must be non-zero")

    start, end = _word_span(words, text, pos, -1)
    if count > 0:
        far_end, near_start = _word_span(words, text, end, count)
        swapped = _swap_spans(text, (start, end), (far_end, near_start))
        return swapped, far_end

    far_start, near_end = _word_span(words, text, start, count)
    swapped = _swap_spans(text, (start, end), (far_start, near_end))
    return swapped, far_start + (end - start)


__all__ = [
    "SyntaxWordProvider",
    "TranspositionError",
    "WordBoundaryProvider",
    "move_words",
    "transpose_words",
]
