"""Windowing engine: scroll state, ranges, placements and notifications."""

from .debounce import DebounceTimer, ManualDebounceTimer
from .dispatcher import MemoizedCallback, NotificationDispatcher
from .list_window import ListWindow, ScrollSurface
from .placement_cache import PlacementCache
from .range_calculator import RangeCalculator
from .scroll_state import ScrollStateMachine
from .signal import Signal

__all__ = [
    "DebounceTimer",
    "ListWindow",
    "ManualDebounceTimer",
    "MemoizedCallback",
    "NotificationDispatcher",
    "PlacementCache",
    "RangeCalculator",
    "ScrollStateMachine",
    "ScrollSurface",
    "Signal",
]
