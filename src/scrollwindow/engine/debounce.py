"""Single-shot debounce timers driving the end-of-scroll transition."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

TimerCallback = Callable[[], None]


class DebounceTimer(Protocol):
    """One re-armable single-shot timer.

    ``start`` replaces any pending callback, so at most one is ever queued.
    """

    def start(self, interval_ms: float, callback: TimerCallback) -> None: ...

    def stop(self) -> None: ...

    @property
    def is_active(self) -> bool: ...


class ManualDebounceTimer:
    """Timer driven by an explicit clock for hosts without an event loop.

    Time only moves when :meth:`advance` is called, which makes scroll
    sessions reproducible in tests and in the command line simulator.
    """

    def __init__(self, now_ms: float = 0.0) -> None:
        self._now_ms = now_ms
        self._due_ms: Optional[float] = None
        self._callback: Optional[TimerCallback] = None
        self.fired_count = 0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    def clock(self) -> float:
        """Current manual time, usable as the window clock."""
        return self._now_ms

    @property
    def is_active(self) -> bool:
        return self._due_ms is not None

    @property
    def due_ms(self) -> Optional[float]:
        return self._due_ms

    def start(self, interval_ms: float, callback: TimerCallback) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self._due_ms = self._now_ms + interval_ms
        self._callback = callback

    def stop(self) -> None:
        self._due_ms = None
        self._callback = None

    def advance(self, delta_ms: float) -> bool:
        """Move the clock forward and fire the callback if it came due."""
        if delta_ms < 0:
            raise ValueError("delta_ms must be >= 0")
        self._now_ms += delta_ms
        return self.run_due()

    def run_due(self) -> bool:
        if self._due_ms is None or self._due_ms > self._now_ms:
            return False
        callback = self._callback
        self._due_ms = None
        self._callback = None
        self.fired_count += 1
        if callback is not None:
            callback()
        return True
