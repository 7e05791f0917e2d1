"""Heterogeneous layout: item sizes come from a callback and are memoised.

Items are measured lazily, front to back, the first time an index at or
beyond the last measured one is requested.  Unmeasured items count towards
the total extent with ``estimated_item_size`` until they are reached, so
the estimate refines as the user scrolls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..domain.models import ScrollAlign, WindowConfig
from ..errors import ConfigurationError
from .base import LayoutStrategy, resolve_alignment

_LOGGER = logging.getLogger(__name__)


@dataclass
class ItemMetadata:
    offset: float
    size: float


@dataclass
class MeasurementCache:
    """Per-window measurement state owned by :class:`HeterogeneousLayout`."""

    estimated_item_size: float
    last_measured_index: int = -1
    items: dict[int, ItemMetadata] = field(default_factory=dict)

    @property
    def measured_count(self) -> int:
        return self.last_measured_index + 1


class HeterogeneousLayout(LayoutStrategy):
    """Variable-size items measured through ``config.item_size(index)``."""

    def init_instance(self, config: WindowConfig) -> MeasurementCache:
        return MeasurementCache(estimated_item_size=config.estimated_item_size)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def item_offset(self, config: WindowConfig, index: int, instance: MeasurementCache) -> float:
        return self._metadata(config, index, instance).offset

    def item_size(self, config: WindowConfig, index: int, instance: MeasurementCache) -> float:
        return self._metadata(config, index, instance).size

    def estimated_total_extent(self, config: WindowConfig, instance: MeasurementCache) -> float:
        last_measured = min(instance.last_measured_index, config.item_count - 1)
        measured_extent = 0.0
        if last_measured >= 0:
            metadata = instance.items[last_measured]
            measured_extent = metadata.offset + metadata.size
        unmeasured = config.item_count - last_measured - 1
        return measured_extent + unmeasured * instance.estimated_item_size

    def start_index_for_offset(self, config: WindowConfig, offset: float, instance: MeasurementCache) -> int:
        return self._find_nearest_item(config, instance, offset)

    def stop_index_for_start_index(
        self,
        config: WindowConfig,
        start_index: int,
        scroll_offset: float,
        instance: MeasurementCache,
    ) -> int:
        if config.item_count <= 0:
            return 0
        metadata = self._metadata(config, start_index, instance)
        max_offset = scroll_offset + config.viewport_extent
        offset = metadata.offset + metadata.size
        stop_index = start_index
        while stop_index < config.item_count - 1 and offset < max_offset:
            stop_index += 1
            offset += self._metadata(config, stop_index, instance).size
        return stop_index

    def offset_for_index_and_alignment(
        self,
        config: WindowConfig,
        index: int,
        align: ScrollAlign,
        scroll_offset: float,
        instance: MeasurementCache,
    ) -> float:
        viewport = config.viewport_extent
        metadata = self._metadata(config, index, instance)
        # Read after measuring so the target item is part of the estimate.
        total = self.estimated_total_extent(config, instance)
        max_offset = max(0, min(total - viewport, metadata.offset))
        min_offset = max(0, metadata.offset - viewport + metadata.size)
        return resolve_alignment(align, scroll_offset, min_offset, max_offset)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _validate(self, config: WindowConfig) -> None:
        if not callable(config.item_size):
            raise ConfigurationError(
                'An invalid "item_size" has been specified. Value should be a '
                f'function. "{type(config.item_size).__name__}" was specified.'
            )

    def _metadata(self, config: WindowConfig, index: int, instance: MeasurementCache) -> ItemMetadata:
        if index > instance.last_measured_index:
            offset = 0.0
            if instance.last_measured_index >= 0:
                last = instance.items[instance.last_measured_index]
                offset = last.offset + last.size
            for position in range(instance.last_measured_index + 1, index + 1):
                size = config.item_size(position)
                instance.items[position] = ItemMetadata(offset=offset, size=size)
                offset += size
            _LOGGER.debug(
                "Measured items %d..%d, extent so far %s",
                instance.last_measured_index + 1,
                index,
                offset,
            )
            instance.last_measured_index = index
        return instance.items[index]

    def _find_nearest_item(self, config: WindowConfig, instance: MeasurementCache, offset: float) -> int:
        last_measured = instance.last_measured_index
        last_measured_offset = instance.items[last_measured].offset if last_measured > 0 else 0
        if last_measured_offset >= offset:
            # The offset lies inside the measured prefix.
            return self._binary_search(config, instance, last_measured, 0, offset)
        return self._exponential_search(config, instance, max(0, last_measured), offset)

    def _binary_search(
        self,
        config: WindowConfig,
        instance: MeasurementCache,
        high: int,
        low: int,
        offset: float,
    ) -> int:
        while low <= high:
            middle = low + (high - low) // 2
            current = self._metadata(config, middle, instance).offset
            if current == offset:
                return middle
            if current < offset:
                low = middle + 1
            else:
                high = middle - 1
        return low - 1 if low > 0 else 0

    def _exponential_search(
        self,
        config: WindowConfig,
        instance: MeasurementCache,
        index: int,
        offset: float,
    ) -> int:
        interval = 1
        while index < config.item_count and self._metadata(config, index, instance).offset < offset:
            index += interval
            interval *= 2
        return self._binary_search(config, instance, min(index, config.item_count - 1), index // 2, offset)
