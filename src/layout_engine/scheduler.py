"""Single-threaded frame scheduler.

Stands in for the UI event loop: timers fire in due order as the clock
advances, and frame callbacks run once per rendered frame.
"""

import heapq
import itertools
from typing import Callable, List, Tuple

from src.layout_engine.config import FRAME_INTERVAL_MS

Callback = Callable[[], None]


class FrameScheduler:
    """Manual clock with delayed timers and per-frame callbacks."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms
        self._timers: List[Tuple[float, int, Callback]] = []
        self._frame_callbacks: List[Callback] = []
        self._sequence = itertools.count()

    def call_later(self, delay_ms: float, callback: Callback):
        """Run *callback* once the clock has advanced by *delay_ms*."""
        due = self.now_ms + max(0.0, delay_ms)
        heapq.heappush(self._timers, (due, next(self._sequence), callback))

    def request_frame(self, callback: Callback):
        """Run *callback* at the next frame."""
        self._frame_callbacks.append(callback)

    def advance(self, elapsed_ms: float):
        """Move the clock forward, firing due timers in order.

        Timers scheduled by a firing timer run in the same call if they
        fall due inside the window.
        """
        target = self.now_ms + elapsed_ms
        while self._timers and self._timers[0][0] <= target:
            due, _, callback = heapq.heappop(self._timers)
            self.now_ms = max(self.now_ms, due)
            callback()
        self.now_ms = target

    def run_frame(self) -> int:
        """Drain the frame callbacks queued before this frame started."""
        callbacks, self._frame_callbacks = self._frame_callbacks, []
        for callback in callbacks:
            callback()
        return len(callbacks)

    def tick(self, elapsed_ms: float = FRAME_INTERVAL_MS):
        """Advance one frame interval, then render a frame."""
        self.advance(elapsed_ms)
        self.run_frame()

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    @property
    def pending_frames(self) -> int:
        return len(self._frame_callbacks)
