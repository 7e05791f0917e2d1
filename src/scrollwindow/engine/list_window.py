"""Headless windowing engine for long scrollable lists.

The window decides which items must exist for the current scroll offset,
where each of them sits and when scrolling has settled.  Hosts feed it raw
scroll offsets, read :meth:`ListWindow.render` output and optionally hand
it a surface it can scroll programmatically.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, Protocol, Union

from ..domain.models import (
    Axis,
    ItemPlacement,
    RenderedItem,
    RenderedWindow,
    RenderRange,
    ScrollAlign,
    ScrollInfo,
    ScrollState,
    WindowConfig,
)
from ..layout.base import LayoutStrategy
from ..settings.schema import validate_config
from .debounce import DebounceTimer
from .dispatcher import NotificationDispatcher
from .placement_cache import PlacementCache
from .range_calculator import RangeCalculator
from .scroll_state import ScrollStateMachine
from .signal import Signal

_LOGGER = logging.getLogger(__name__)


class ScrollSurface(Protocol):
    """Host container whose scroll position the window can set.

    Surfaces may also provide ``sync_range(total_extent)``, called after
    every commit with the current estimated extent, and ``detach()``,
    called once on disposal.
    """

    def set_scroll_offset(self, axis: Axis, offset: float) -> None: ...


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ListWindow:
    """Windowing engine bound to one layout strategy for its whole lifetime.

    Every state change renders and commits synchronously: the new range is
    computed, programmatic offsets are written to the surface and observers
    are notified if the range or scroll position actually changed.
    """

    def __init__(
        self,
        config: WindowConfig,
        layout: LayoutStrategy,
        *,
        timer: Optional[DebounceTimer] = None,
        clock: Optional[Callable[[], float]] = None,
        surface: Optional[ScrollSurface] = None,
        on_items_rendered: Optional[Callable[[RenderRange], Any]] = None,
        on_scroll: Optional[Callable[[ScrollInfo], Any]] = None,
    ) -> None:
        self._check(config, layout)
        self._config = config
        self._layout = layout
        self._instance = layout.init_instance(config)
        if timer is None:
            from ..gui.qt_timer import QtDebounceTimer

            timer = QtDebounceTimer()
        self._clock = clock or _monotonic_ms
        self._machine = ScrollStateMachine(
            timer,
            self._clock,
            self._settle,
            initial_offset=config.initial_scroll_offset,
        )
        self._ranges = RangeCalculator(layout)
        self._placements = PlacementCache(layout, self._current_config, self._instance)
        self._dispatcher = NotificationDispatcher(on_items_rendered, on_scroll)
        self._surface = surface
        self._mounted = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self, surface: Optional[ScrollSurface] = None) -> RenderedWindow:
        """Render for the first time and apply the initial offset."""
        if surface is not None:
            self._surface = surface
        self._mounted = True
        rendered = self.render()
        if self._surface is not None:
            # Sized after the first pass so measured items count.
            self._sync_surface_range()
            self._surface.set_scroll_offset(self._config.axis, self._config.initial_scroll_offset)
        self._dispatch()
        return rendered

    def dispose(self) -> None:
        """Cancel the pending debounce timer and detach from the surface."""
        if self._machine.disposed:
            return
        self._machine.dispose()
        self._dispatcher.close()
        surface, self._surface = self._surface, None
        detach = getattr(surface, "detach", None)
        if callable(detach):
            detach()
        _LOGGER.debug("ListWindow disposed")

    def __enter__(self) -> ListWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # ------------------------------------------------------------------
    # Scroll input
    # ------------------------------------------------------------------

    def on_scroll(self, offset: float, timestamp: Optional[float] = None) -> None:
        """Feed a raw offset measured by the host container."""
        if self._machine.measure(offset, timestamp):
            self._update()

    def scroll_to(self, offset: float) -> None:
        """Scroll programmatically to *offset*."""
        if self._machine.request(offset):
            self._update()

    def scroll_to_item(self, index: int, align: Union[ScrollAlign, str] = ScrollAlign.AUTO) -> None:
        """Scroll so that item *index* is visible under *align*."""
        offset = self._layout.offset_for_index_and_alignment(
            self._config,
            index,
            ScrollAlign(align),
            self._machine.state.scroll_offset,
            self._instance,
        )
        self.scroll_to(offset)

    def update_config(self, config: WindowConfig) -> RenderedWindow:
        """Adopt a new configuration, keeping layout measurements."""
        self._check(config, self._layout)
        self._config = config
        rendered = self.render()
        self._commit()
        return rendered

    # ------------------------------------------------------------------
    # Render-time queries
    # ------------------------------------------------------------------

    def render(self) -> RenderedWindow:
        """Materialise the items of the current overscanned range.

        ``config.render_item`` runs here only; scroll events update
        placements and measurements without calling it.
        """
        config = self._config
        render_range, items = self._materialize()
        # Read the extent after the items exist so sizes measured during this
        # pass are included.
        total = self.estimated_total_extent()
        outputs = [config.render_item(item) for item in items] if config.render_item is not None else []
        return RenderedWindow(
            items=items,
            estimated_total_extent=total,
            is_scrolling=self._machine.state.is_scrolling,
            range=render_range,
            outputs=outputs,
        )

    def render_range(self) -> RenderRange:
        return self._ranges.compute(
            self._config,
            self.working_offset,
            self._machine.state.scroll_direction,
            self._instance,
        )

    def placement_of(self, index: int) -> ItemPlacement:
        return self._placements.placement(index)

    def estimated_total_extent(self) -> float:
        return self._layout.estimated_total_extent(self._config, self._instance)

    @property
    def working_offset(self) -> float:
        return self._machine.working_offset(self._config.use_adjusted_offsets)

    @property
    def state(self) -> ScrollState:
        """Snapshot of the scroll state; mutating it has no effect."""
        return self._machine.state.snapshot()

    @property
    def is_scrolling(self) -> bool:
        return self._machine.state.is_scrolling

    @property
    def config(self) -> WindowConfig:
        return self._config

    @property
    def layout(self) -> LayoutStrategy:
        return self._layout

    @property
    def placement_cache(self) -> PlacementCache:
        return self._placements

    @property
    def items_rendered(self) -> Signal:
        return self._dispatcher.items_rendered

    @property
    def scrolled(self) -> Signal:
        return self._dispatcher.scrolled

    @property
    def disposed(self) -> bool:
        return self._machine.disposed

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _check(config: WindowConfig, layout: LayoutStrategy) -> None:
        validate_config(config)
        layout.validate(config)

    def _current_config(self) -> WindowConfig:
        return self._config

    def _materialize(self) -> tuple[RenderRange, list[RenderedItem]]:
        config = self._config
        render_range = self.render_range()
        is_scrolling = self._machine.state.is_scrolling if config.use_is_scrolling else None
        items = [
            RenderedItem(
                index=index,
                key=config.item_key(index),
                placement=self._placements.placement(index),
                is_scrolling=is_scrolling,
            )
            for index in RangeCalculator.indices(render_range, config.item_count)
        ]
        return render_range, items

    def _update(self) -> None:
        self._materialize()
        self._commit()

    def _sync_surface_range(self) -> None:
        sync_range = getattr(self._surface, "sync_range", None)
        if callable(sync_range):
            sync_range(self.estimated_total_extent())

    def _commit(self) -> None:
        state = self._machine.state
        self._sync_surface_range()
        if state.scroll_update_was_requested:
            if self._surface is not None:
                self._surface.set_scroll_offset(self._config.axis, state.scroll_offset)
        elif self._config.use_adjusted_offsets:
            self._machine.note_commit()
        self._dispatch()

    def _dispatch(self) -> None:
        self._dispatcher.dispatch(self.render_range(), self._config.item_count, self._machine.state)

    def _settle(self) -> None:
        self._update()
        # Cleared only after the settled state is committed so items that
        # ignore the scrolling flag keep their placement objects until now.
        self._placements.clear()
