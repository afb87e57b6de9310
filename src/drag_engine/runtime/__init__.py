"""Runtime services: telemetry and configuration."""

from .config import DragConfig

__all__ = ["DragConfig"]
