"""Qt integration for :mod:`scrollwindow` (requires PySide6)."""

from .qt_timer import QtDebounceTimer
from .scroll_surface import ListWindowSignals, QtScrollSurface, placement_rect

__all__ = ["ListWindowSignals", "QtDebounceTimer", "QtScrollSurface", "placement_rect"]
