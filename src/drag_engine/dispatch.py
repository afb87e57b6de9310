"""Route drag requests to line, region, or word operations on a Buffer."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ContextManager, List, Optional

from drag_engine.actions import (
    DragResult,
    drag_line_vertically,
    drag_region_horizontally,
    drag_region_lines_vertically,
    drag_word_horizontally,
)
from drag_engine.buffer import Buffer, BufferSync
from drag_engine.runtime import DragConfig, telemetry
from drag_engine.words import SyntaxWordProvider, WordBoundaryProvider

DragHook = Callable[[Buffer], None]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def signed(self, count: int) -> int:
        return -count if self in (Direction.UP, Direction.LEFT) else count


@dataclass(slots=True)
class DragReport:
    """What a dispatch did, for the host to show or ignore."""

    applied: bool
    operation: str
    status: str = "dragged"
    message: Optional[str] = None


@dataclass(slots=True)
class DragHooks:
    """Callbacks run around every vertical drag, applied or not."""

    before_drag: List[DragHook] = field(default_factory=list)
    after_drag: List[DragHook] = field(default_factory=list)
    suspend_formatting: Callable[[], ContextManager[object]] = nullcontext

    def run_before(self, buffer: Buffer) -> None:
        for callback in self.before_drag:
            callback(buffer)

    def run_after(self, buffer: Buffer) -> None:
        for callback in self.after_drag:
            callback(buffer)


class DragDispatcher:
    """Pick the drag variant for the buffer's selection state and apply it."""

    def __init__(
        self,
        buffer: Buffer,
        *,
        config: DragConfig | None = None,
        hooks: DragHooks | None = None,
        words: WordBoundaryProvider | None = None,
    ) -> None:
        self.buffer = buffer
        self.config = config or DragConfig()
        self.hooks = hooks or DragHooks()
        self.words = words or SyntaxWordProvider(self.config.extra_word_chars)
        self.logger = telemetry.get_logger(self.config.logger_name)

    def up(self, count: int = 1) -> DragReport:
        return self.drag(Direction.UP, count)

    def down(self, count: int = 1) -> DragReport:
        return self.drag(Direction.DOWN, count)

    def left(self, count: int = 1) -> DragReport:
        return self.drag(Direction.LEFT, count)

    def right(self, count: int = 1) -> DragReport:
        return self.drag(Direction.RIGHT, count)

    def drag(self, direction: Direction | str, count: int = 1) -> DragReport:
        direction = Direction(direction)
        if not direction.vertical:
            return self._dispatch(direction, count)

        self.hooks.run_before(self.buffer)
        try:
            with self.hooks.suspend_formatting():
                return self._dispatch(direction, count)
        finally:
            self.hooks.run_after(self.buffer)

    def drag_host(
        self, sync: BufferSync, direction: Direction | str, count: int = 1
    ) -> DragReport:
        """Drag inside a host's buffer: pull its state, drag, push back if applied."""

        self.buffer.load_mirror(sync.pull_buffer())
        report = self.drag(direction, count)
        if report.applied:
            sync.push_host_edit(self.buffer.mirror())
        return report

    def _dispatch(self, direction: Direction, count: int) -> DragReport:
        delta = direction.signed(count)
        selection = self.buffer.selection_offsets()
        text = self.buffer.text
        if direction.vertical:
            if selection is None:
                operation = "line"
                result = drag_line_vertically(text, self.buffer.point, delta)
            else:
                operation = "region_lines"
                result = drag_region_lines_vertically(text, *selection, delta)
        elif selection is None:
            operation = "word"
            result = drag_word_horizontally(text, self.buffer.point, delta, self.words)
        else:
            operation = "region"
            result = drag_region_horizontally(text, *selection, delta)

        if delta == 0:
            return DragReport(applied=False, operation=operation, status="noop")

        with telemetry.span(
            name=f"drag::{operation}",
            logger_name=self.config.logger_name,
            component="drag",
            metadata={"direction": direction.value, "count": count},
        ) as handle:
            return self._commit(operation, direction, result, handle)

    def _commit(
        self,
        operation: str,
        direction: Direction,
        result: DragResult,
        handle: telemetry.SpanHandle,
    ) -> DragReport:
        if not result.applied:
            handle.reject(result.reason, level=self.config.rejection_level)
            telemetry.record_event(
                "drag.rejected",
                level=self.config.rejection_level,
                data={"operation": operation, "kind": result.kind.value},
                logger_name=self.config.logger_name,
            )
            return DragReport(
                applied=False,
                operation=operation,
                status=result.kind.value,
                message=result.reason,
            )

        self.buffer.apply_edit(
            result.text,
            point=result.point,
            mark=result.mark,
            label=f"drag_{operation}",
        )
        telemetry.record_event(
            "drag.applied",
            level="debug",
            data={
                "operation": operation,
                "direction": direction.value,
                "cursor": self.buffer.state.cursor,
            },
            logger_name=self.config.logger_name,
        )
        return DragReport(applied=True, operation=operation)


__all__ = ["Direction", "DragDispatcher", "DragHook", "DragHooks", "DragReport"]
