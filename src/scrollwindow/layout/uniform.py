"""Uniform layout: every item has the same size along the scroll axis."""

from __future__ import annotations

import math
from typing import Any

from ..domain.models import ScrollAlign, WindowConfig
from ..errors import ConfigurationError
from .base import LayoutStrategy, resolve_alignment


class UniformLayout(LayoutStrategy):
    """Fixed-size items; every mapping is a closed-form expression.

    ``config.item_size`` must be a number.  No per-window state is kept.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def item_offset(self, config: WindowConfig, index: int, instance: Any) -> float:
        return index * config.item_size

    def item_size(self, config: WindowConfig, index: int, instance: Any) -> float:
        return config.item_size

    def estimated_total_extent(self, config: WindowConfig, instance: Any) -> float:
        return config.item_size * config.item_count

    def start_index_for_offset(self, config: WindowConfig, offset: float, instance: Any) -> int:
        first = math.floor(offset / config.item_size)
        return max(0, min(config.item_count - 1, first))

    def stop_index_for_start_index(
        self,
        config: WindowConfig,
        start_index: int,
        scroll_offset: float,
        instance: Any,
    ) -> int:
        size = config.item_size
        offset = start_index * size
        visible_count = math.ceil((config.viewport_extent + scroll_offset - offset) / size)
        # Subtract one because the returned index is inclusive.
        return max(0, min(config.item_count - 1, start_index + visible_count - 1))

    def offset_for_index_and_alignment(
        self,
        config: WindowConfig,
        index: int,
        align: ScrollAlign,
        scroll_offset: float,
        instance: Any,
    ) -> float:
        size = config.item_size
        viewport = config.viewport_extent
        last_item_offset = max(0, config.item_count * size - viewport)
        max_offset = min(last_item_offset, index * size)
        min_offset = max(0, index * size - viewport + size)
        return resolve_alignment(align, scroll_offset, min_offset, max_offset)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _validate(self, config: WindowConfig) -> None:
        size = config.item_size
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            raise ConfigurationError(
                'An invalid "item_size" has been specified. Value should be a '
                f'number. "{type(size).__name__}" was specified.'
            )
        if size <= 0:
            raise ConfigurationError(
                f'An invalid "item_size" has been specified. Value should be positive. "{size}" was specified.'
            )
