"""Custom exception hierarchy for scrollwindow."""

from __future__ import annotations


class ScrollWindowError(Exception):
    """Base class for all custom errors raised by scrollwindow."""


class ConfigurationError(ScrollWindowError):
    """Raised when a window configuration is missing or malformed."""


__all__ = ["ConfigurationError", "ScrollWindowError"]
