"""Explicit configuration handed to the drag dispatcher at setup time."""

from __future__ import annotations

from dataclasses import dataclass

from .telemetry import env_flag, env_value


@dataclass(frozen=True, slots=True)
class DragConfig:
    """Options the host chooses once, instead of editor-global variables."""

    extra_word_chars: str = ""
    log_rejections: bool = True
    logger_name: str = "drag_engine.dispatch"

    @classmethod
    def from_env(cls) -> "DragConfig":
        """Build a config from ``DRAG_ENGINE_*`` variables, falling back to defaults."""

        return cls(
            extra_word_chars=env_value("EXTRA_WORD_CHARS") or "",
            log_rejections=env_flag("LOG_REJECTIONS", True),
            logger_name=env_value("LOGGER") or "drag_engine.dispatch",
        )

    @property
    def rejection_level(self) -> str:
        return "warning" if self.log_rejections else "debug"
