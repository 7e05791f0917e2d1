"""Observer lists for engine notifications.

Windows are driven from one thread (the host's event loop or a test), so
handlers are called synchronously and in connection order.  The Qt glue in
:mod:`scrollwindow.gui` relays these into real Qt signals.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_LOGGER = logging.getLogger(__name__)

Handler = Callable[..., Any]


class Signal:
    """Ordered set of handlers notified by :meth:`emit`.

    A handler that raises is logged and skipped; the remaining handlers
    still run and the error never reaches the engine.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def connect(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        self._handlers.remove(handler)

    def disconnect_all(self) -> None:
        self._handlers = []

    def emit(self, *args: Any) -> None:
        # Handlers may connect or disconnect while being notified.
        for handler in tuple(self._handlers):
            try:
                handler(*args)
            except Exception:
                _LOGGER.exception("Notification handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
