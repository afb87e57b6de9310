"""Line storage backing drag_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Text kept as a list of lines split on ``"\\n"`` only.

    A trailing newline yields a final empty line, so ``"\\n".join`` of the
    lines always reproduces the source text byte for byte.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def replace_text(self, text: str) -> "BufferDocument":
        """Return a new document holding ``text`` with the version bumped."""

        return BufferDocument.from_text(text, version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def length(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]
