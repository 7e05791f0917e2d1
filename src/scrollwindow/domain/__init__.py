"""Domain types shared by the layout strategies and the window engine."""

from .models import (
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

__all__ = [
    "Axis",
    "ItemPlacement",
    "RenderRange",
    "RenderedItem",
    "RenderedWindow",
    "ScrollAlign",
    "ScrollDirection",
    "ScrollInfo",
    "ScrollState",
    "WindowConfig",
]
