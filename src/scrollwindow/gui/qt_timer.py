"""Debounce timer backed by a single-shot :class:`QTimer`."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtDebounceTimer:
    """Re-armable single-shot timer running on the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._callback: Optional[Callable[[], None]] = None
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self, interval_ms: float, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start(max(0, int(round(interval_ms))))

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
