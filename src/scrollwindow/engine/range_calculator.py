"""Visible and overscanned index ranges for a working offset."""

from __future__ import annotations

from typing import Any, Iterator

from ..domain.models import RenderRange, ScrollDirection, WindowConfig
from ..layout.base import LayoutStrategy


class RangeCalculator:
    """Computes :class:`RenderRange` values through a layout strategy.

    Overscan is biased towards the direction of travel: that side receives
    ``max(overscan_count, 1)`` extra items while the trailing side always
    gets exactly one, so keyboard focus can move past the visible edge
    without wrapping around.
    """

    def __init__(self, layout: LayoutStrategy) -> None:
        self._layout = layout

    def compute(
        self,
        config: WindowConfig,
        offset: float,
        direction: ScrollDirection,
        instance: Any,
    ) -> RenderRange:
        start_index = self._layout.start_index_for_offset(config, offset, instance)
        stop_index = self._layout.stop_index_for_start_index(config, start_index, offset, instance)

        overscan = max(1, config.overscan_count)
        backward = overscan if direction == ScrollDirection.BACKWARD else 1
        forward = overscan if direction == ScrollDirection.FORWARD else 1

        return RenderRange(
            overscan_start_index=max(0, start_index - backward),
            overscan_stop_index=max(0, min(config.item_count - 1, stop_index + forward)),
            visible_start_index=start_index,
            visible_stop_index=stop_index,
        )

    @staticmethod
    def indices(render_range: RenderRange, item_count: int) -> Iterator[int]:
        """Indices to materialise; empty for an empty list."""
        if item_count <= 0:
            return iter(())
        return iter(range(render_range.overscan_start_index, render_range.overscan_stop_index + 1))
