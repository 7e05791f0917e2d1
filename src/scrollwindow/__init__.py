"""Windowing engine for long scrollable lists.

Only the items around the current scroll offset are ever materialised; the
rest of the list exists as an estimated extent.
"""

from .config import DEBOUNCE_INTERVAL_MS, DRIFT_REFERENCE_INTERVAL_MS
from .domain.models import (
    Axis,
    ItemPlacement,
    RenderedItem,
    RenderedWindow,
    RenderRange,
    ScrollAlign,
    ScrollDirection,
    ScrollInfo,
    ScrollState,
    WindowConfig,
)
from .engine import ListWindow, ManualDebounceTimer, ScrollSurface
from .errors import ConfigurationError, ScrollWindowError
from .layout import HeterogeneousLayout, LayoutStrategy, UniformLayout

__all__ = [
    "Axis",
    "ConfigurationError",
    "DEBOUNCE_INTERVAL_MS",
    "DRIFT_REFERENCE_INTERVAL_MS",
    "HeterogeneousLayout",
    "ItemPlacement",
    "LayoutStrategy",
    "ListWindow",
    "ManualDebounceTimer",
    "RenderRange",
    "RenderedItem",
    "RenderedWindow",
    "ScrollAlign",
    "ScrollDirection",
    "ScrollInfo",
    "ScrollState",
    "ScrollSurface",
    "ScrollWindowError",
    "UniformLayout",
    "WindowConfig",
]
