"""Bind a :class:`ListWindow` to a Qt scroll area."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QObject, QRectF, Signal
from PySide6.QtWidgets import QAbstractScrollArea, QScrollBar

from ..domain.models import Axis, ItemPlacement, RenderRange, ScrollInfo

if TYPE_CHECKING:
    from ..engine.list_window import ListWindow

_LOGGER = logging.getLogger(__name__)


class QtScrollSurface(QObject):
    """Feeds scroll bar movement into a window and applies its scroll requests.

    Writes made through :meth:`set_scroll_offset` are not reported back
    to the window as raw measurements.  Destroying the scroll area
    disposes the window so no debounce callback outlives the widget.
    """

    def __init__(self, area: QAbstractScrollArea, window: ListWindow) -> None:
        super().__init__()
        self._area = area
        self._window = window
        self._attached = True
        self._writing = False
        self._scroll_bar = self._bar_for(window.config.axis)
        self._scroll_bar.valueChanged.connect(self._on_value_changed)
        area.destroyed.connect(self._on_area_destroyed)
        _LOGGER.debug("Bound %s window to %r", window.config.axis.value, area)

    @property
    def scroll_bar(self) -> QScrollBar:
        return self._scroll_bar

    def set_scroll_offset(self, axis: Axis, offset: float) -> None:
        bar = self._bar_for(axis)
        self.sync_range(self._window.estimated_total_extent())
        self._writing = True
        try:
            bar.setValue(int(round(offset)))
        finally:
            self._writing = False

    def sync_range(self, total_extent: float) -> None:
        """Size the scroll bar for *total_extent* of content."""
        viewport = self._window.config.viewport_extent
        self._scroll_bar.setPageStep(max(1, int(viewport)))
        self._scroll_bar.setRange(0, max(0, int(total_extent - viewport)))

    def detach(self) -> None:
        if not self._attached:
            return
        self._attached = False
        try:
            self._scroll_bar.valueChanged.disconnect(self._on_value_changed)
            self._area.destroyed.disconnect(self._on_area_destroyed)
        except (RuntimeError, TypeError):
            # Scroll area already deleted on the C++ side.
            pass

    def _bar_for(self, axis: Axis) -> QScrollBar:
        if axis == Axis.HORIZONTAL:
            return self._area.horizontalScrollBar()
        return self._area.verticalScrollBar()

    def _on_value_changed(self, value: int) -> None:
        if self._writing:
            return
        self._window.on_scroll(float(value))

    def _on_area_destroyed(self, *_args: object) -> None:
        self._attached = False
        self._window.dispose()


class ListWindowSignals(QObject):
    """Relays engine notifications as Qt signals."""

    itemsRendered = Signal(int, int, int, int)
    scrolled = Signal(str, float, bool)

    def __init__(self, window: ListWindow, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        window.items_rendered.connect(self._relay_items_rendered)
        window.scrolled.connect(self._relay_scrolled)

    def _relay_items_rendered(self, render_range: RenderRange) -> None:
        self.itemsRendered.emit(*render_range)

    def _relay_scrolled(self, info: ScrollInfo) -> None:
        self.scrolled.emit(info.scroll_direction.value, float(info.scroll_offset), info.scroll_update_was_requested)


def placement_rect(placement: ItemPlacement, cross_extent: float) -> QRectF:
    """Return the item rectangle for a viewport *cross_extent* wide (or tall)."""
    if placement.axis == Axis.HORIZONTAL:
        return QRectF(placement.offset, 0, placement.size, cross_extent)
    return QRectF(0, placement.offset, cross_extent, placement.size)
