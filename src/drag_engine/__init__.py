"""Drag lines, regions, and words through a text buffer."""

__all__ = [
    "actions",
    "buffer",
    "dispatch",
    "runtime",
    "words",
]

__version__ = "0.1.0"
