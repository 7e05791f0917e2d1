"""Scroll state machine: offset, direction and the debounced scrolling flag."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..config import DEBOUNCE_INTERVAL_MS, DRIFT_REFERENCE_INTERVAL_MS
from ..domain.models import ScrollDirection, ScrollState
from .debounce import DebounceTimer

_LOGGER = logging.getLogger(__name__)


class ScrollStateMachine:
    """Single writer of :class:`ScrollState`.

    Three events move the machine: a raw offset measured by the host
    (:meth:`measure`), a programmatic request (:meth:`request`) and the
    debounce timeout.  Both scroll events re-arm the timer; when it fires
    the machine leaves the scrolling state and calls *on_settled*.
    """

    def __init__(
        self,
        timer: DebounceTimer,
        clock: Callable[[], float],
        on_settled: Callable[[], None],
        *,
        initial_offset: float = 0,
        debounce_interval_ms: float = DEBOUNCE_INTERVAL_MS,
    ) -> None:
        self._timer = timer
        self._clock = clock
        self._on_settled = on_settled
        self._debounce_interval_ms = debounce_interval_ms
        self._state = ScrollState(scroll_offset=initial_offset)
        self._elapsed_ms = 0.0
        self._disposed = False

    @property
    def state(self) -> ScrollState:
        return self._state

    @property
    def elapsed_ms(self) -> float:
        """Time between the last raw measurement and the last commit."""
        return self._elapsed_ms

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def measure(self, offset: float, timestamp: Optional[float] = None) -> bool:
        """Apply a raw measurement; return ``False`` when nothing changed."""
        if self._disposed:
            return False
        state = self._state
        if offset == state.scroll_offset:
            # Echo of an offset we already hold, typically our own write
            # after a programmatic scroll.
            return False
        state.scroll_direction = self._direction(state.scroll_offset, offset)
        state.offset_delta = offset - state.scroll_offset
        state.scroll_offset = offset
        state.scroll_update_was_requested = False
        state.is_scrolling = True
        state.capture_timestamp = self._clock() if timestamp is None else timestamp
        self._arm()
        return True

    def request(self, offset: float) -> bool:
        """Apply a programmatic scroll to *offset*."""
        if self._disposed:
            return False
        state = self._state
        state.scroll_direction = self._direction(state.scroll_offset, offset)
        state.scroll_offset = offset
        state.offset_delta = 0
        state.scroll_update_was_requested = True
        self._arm()
        return True

    def note_commit(self) -> None:
        """Record elapsed time since the last measurement for drift compensation."""
        self._elapsed_ms = self._clock() - self._state.capture_timestamp

    def working_offset(self, adjusted: bool, elapsed_ms: Optional[float] = None) -> float:
        """Offset used for range computation.

        With *adjusted* set, the last measured delta is scaled by the
        fraction of a display frame that passed before the commit.
        """
        state = self._state
        if not adjusted:
            return state.scroll_offset
        elapsed = self._elapsed_ms if elapsed_ms is None else elapsed_ms
        fraction = min(1.0, max(0.0, elapsed) / DRIFT_REFERENCE_INTERVAL_MS)
        return state.scroll_offset + state.offset_delta * fraction

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._timer.stop()
        _LOGGER.debug("Scroll state machine disposed at offset %s", self._state.scroll_offset)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _direction(previous: float, offset: float) -> ScrollDirection:
        return ScrollDirection.FORWARD if previous < offset else ScrollDirection.BACKWARD

    def _arm(self) -> None:
        self._timer.stop()
        self._timer.start(self._debounce_interval_ms, self._on_timeout)

    def _on_timeout(self) -> None:
        if self._disposed:
            return
        self._state.is_scrolling = False
        self._state.offset_delta = 0
        _LOGGER.debug("Scrolling settled at offset %s", self._state.scroll_offset)
        self._on_settled()
