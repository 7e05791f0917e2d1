"""Value objects describing a windowed list: configuration, state and output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional, Union

from ..config import DEFAULT_ESTIMATED_ITEM_SIZE, DEFAULT_OVERSCAN_COUNT, FILL

Extent = Union[int, float, str, None]
ItemSize = Union[int, float, Callable[[int], float]]


class Axis(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class ScrollDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class ScrollAlign(str, Enum):
    AUTO = "auto"
    CENTER = "center"
    START = "start"
    END = "end"


def _identity_key(index: int) -> Any:
    return index


@dataclass(frozen=True)
class WindowConfig:
    """Immutable configuration for one render cycle of a :class:`ListWindow`.

    ``height`` and ``width`` mirror the container size.  The one along the
    scroll axis must be numeric; the other may be any CSS-like marker (for
    example ``"100%"``) because the engine never reads it.
    """

    item_count: int
    item_size: ItemSize
    axis: Axis = Axis.VERTICAL
    height: Extent = None
    width: Extent = None
    overscan_count: int = DEFAULT_OVERSCAN_COUNT
    item_key: Callable[[int], Any] = _identity_key
    use_adjusted_offsets: bool = False
    use_is_scrolling: bool = False
    initial_scroll_offset: float = 0
    estimated_item_size: float = DEFAULT_ESTIMATED_ITEM_SIZE
    render_item: Optional[Callable[["RenderedItem"], Any]] = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "axis", Axis(self.axis))
        except (TypeError, ValueError):
            # Left as given; validation reports the bad value.
            pass

    @property
    def viewport_extent(self) -> float:
        """Viewport size along the scroll axis."""
        if self.axis == Axis.HORIZONTAL:
            return self.width  # type: ignore[return-value]
        return self.height  # type: ignore[return-value]

    def replace(self, **changes: Any) -> WindowConfig:
        return replace(self, **changes)


@dataclass
class ScrollState:
    """Mutable scroll bookkeeping owned by the scroll state machine."""

    scroll_offset: float = 0
    scroll_direction: ScrollDirection = ScrollDirection.FORWARD
    is_scrolling: bool = False
    scroll_update_was_requested: bool = False
    offset_delta: float = 0
    capture_timestamp: float = 0

    def snapshot(self) -> ScrollState:
        return replace(self)


class RenderRange(NamedTuple):
    """Inclusive index bounds of the overscanned and visible windows."""

    overscan_start_index: int
    overscan_stop_index: int
    visible_start_index: int
    visible_stop_index: int


@dataclass(frozen=True, eq=False)
class ItemPlacement:
    """Visual rectangle assigned to one item.

    Placements compare by identity so consumers can skip re-rendering an
    item whose placement object did not change.
    """

    axis: Axis
    offset: float
    size: float
    cross_extent: str = field(default=FILL)

    @property
    def left(self) -> float:
        return self.offset if self.axis == Axis.HORIZONTAL else 0

    @property
    def top(self) -> float:
        return self.offset if self.axis == Axis.VERTICAL else 0

    @property
    def width(self) -> Union[float, str]:
        return self.size if self.axis == Axis.HORIZONTAL else self.cross_extent

    @property
    def height(self) -> Union[float, str]:
        return self.size if self.axis == Axis.VERTICAL else self.cross_extent

    def as_style(self) -> dict[str, Any]:
        return {
            "position": "absolute",
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }


class ScrollInfo(NamedTuple):
    scroll_direction: ScrollDirection
    scroll_offset: float
    scroll_update_was_requested: bool


class RenderedItem(NamedTuple):
    index: int
    key: Any
    placement: ItemPlacement
    # ``None`` unless the window was configured with ``use_is_scrolling``.
    is_scrolling: Optional[bool]


class RenderedWindow(NamedTuple):
    """Result of one render pass."""

    items: list[RenderedItem]
    estimated_total_extent: float
    is_scrolling: bool
    range: RenderRange
    outputs: list[Any]
