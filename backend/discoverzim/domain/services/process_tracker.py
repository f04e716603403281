"""
Process Tracker - Progress state for a named multi-step workflow.

Pure state holding: the caller decides when a step starts. The tracker never
validates step semantics or ordering; it only keeps its numbers in range:
    0 <= progress <= 100
    0 <= current_step < len(steps)   (whenever steps exist)
"""

from __future__ import annotations
import asyncio
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

Scheduler = Callable[[float, Callable[[], None]], Any]


@dataclass(frozen=True)
class ProcessSnapshot:
    is_open: bool
    title: str
    description: Optional[str]
    progress: float
    steps: tuple[str, ...]
    current_step: int

    @property
    def current_label(self) -> Optional[str]:
        if not self.steps:
            return None
        return self.steps[self.current_step]


def _default_scheduler(delay: float, callback: Callable[[], None]) -> Any:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
    return loop.call_later(delay, callback)


class ProcessTracker:
    def __init__(
        self, complete_delay: float = 1.0, scheduler: Optional[Scheduler] = None
    ):
        self.complete_delay = complete_delay
        self._scheduler = scheduler or _default_scheduler
        self._pending_hide: Any = None

        self.is_open = False
        self.title = ""
        self.description: Optional[str] = None
        self.progress = 0.0
        self.steps: tuple[str, ...] = ()
        self.current_step = 0

    def start(
        self, title: str, steps: list[str] | tuple[str, ...], description: Optional[str] = None
    ) -> None:
        self._cancel_pending_hide()
        self.is_open = True
        self.title = title
        self.description = description
        self.progress = 0.0
        self.steps = tuple(steps)
        self.current_step = 0

    def advance(self, step_index: int, progress: Optional[float] = None) -> None:
        self.current_step = self._clamp_step(step_index)
        if progress is None:
            if not self.steps:
                progress = 0.0
            else:
                progress = (step_index + 1) / len(self.steps) * 100
        self.progress = min(max(float(progress), 0.0), 100.0)

    def complete(self) -> None:
        self.progress = 100.0
        self.current_step = max(len(self.steps) - 1, 0)
        self._cancel_pending_hide()
        self._pending_hide = self._scheduler(self.complete_delay, self._hide)

    def close(self) -> None:
        self._cancel_pending_hide()
        self.is_open = False

    def snapshot(self) -> ProcessSnapshot:
        return ProcessSnapshot(
            is_open=self.is_open,
            title=self.title,
            description=self.description,
            progress=self.progress,
            steps=self.steps,
            current_step=self.current_step,
        )

    def _hide(self) -> None:
        self._pending_hide = None
        self.is_open = False

    def _clamp_step(self, step_index: int) -> int:
        if not self.steps:
            return 0
        return min(max(step_index, 0), len(self.steps) - 1)

    def _cancel_pending_hide(self) -> None:
        # Both asyncio.TimerHandle and threading.Timer expose cancel()
        if self._pending_hide is not None and hasattr(self._pending_hide, "cancel"):
            self._pending_hide.cancel()
        self._pending_hide = None
