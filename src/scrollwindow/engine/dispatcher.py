"""Change-only delivery of range and scroll notifications."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..domain.models import RenderRange, ScrollDirection, ScrollInfo, ScrollState
from .signal import Signal

_LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()


class MemoizedCallback:
    """Call *target* only when the arguments differ from the previous call."""

    def __init__(self, target: Callable[..., Any]) -> None:
        self._target = target
        self._last_args: Any = _UNSET

    def __call__(self, *args: Any) -> bool:
        if self._last_args is not _UNSET and self._last_args == args:
            return False
        self._last_args = args
        self._target(*args)
        return True

    def reset(self) -> None:
        self._last_args = _UNSET


class NotificationDispatcher:
    """Reports the rendered range and scroll position to observers.

    Each channel remembers what it last delivered and stays silent until
    something changes.  Observers are either the optional callbacks given
    at construction or handlers connected to :attr:`items_rendered` and
    :attr:`scrolled`; both receive the same payload.
    """

    def __init__(
        self,
        on_items_rendered: Optional[Callable[[RenderRange], Any]] = None,
        on_scroll: Optional[Callable[[ScrollInfo], Any]] = None,
    ) -> None:
        self.items_rendered = Signal()
        self.scrolled = Signal()
        if on_items_rendered is not None:
            self.items_rendered.connect(on_items_rendered)
        if on_scroll is not None:
            self.scrolled.connect(on_scroll)
        self._range_channel = MemoizedCallback(self._emit_range)
        self._scroll_channel = MemoizedCallback(self._emit_scroll)

    def dispatch(self, render_range: RenderRange, item_count: int, state: ScrollState) -> None:
        if self.items_rendered.handler_count and item_count > 0:
            self._range_channel(*render_range)
        if self.scrolled.handler_count:
            self._scroll_channel(
                state.scroll_direction,
                state.scroll_offset,
                state.scroll_update_was_requested,
            )

    def close(self) -> None:
        self.items_rendered.disconnect_all()
        self.scrolled.disconnect_all()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _emit_range(self, *values: int) -> None:
        render_range = RenderRange(*values)
        _LOGGER.debug("Items rendered %s", render_range)
        self.items_rendered.emit(render_range)

    def _emit_scroll(self, direction: ScrollDirection, offset: float, requested: bool) -> None:
        self.scrolled.emit(ScrollInfo(direction, offset, requested))
