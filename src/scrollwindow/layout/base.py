"""Layout strategy contract consumed by the window engine."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from .. import config as _config
from ..domain.models import ScrollAlign, WindowConfig


class LayoutStrategy(ABC):
    """Maps item indices to positions along the scroll axis.

    Every operation receives the active :class:`WindowConfig` and the opaque
    instance state returned by :meth:`init_instance`.  The engine threads
    that state through unchanged and never looks inside it.
    """

    def init_instance(self, config: WindowConfig) -> Any:
        """Create per-window state; stateless layouts return ``None``."""
        return None

    def validate(self, config: WindowConfig) -> None:
        """Raise :class:`~scrollwindow.errors.ConfigurationError` for bad input.

        A no-op when validation is disabled for production use.
        """
        if _config.VALIDATION_ENABLED:
            self._validate(config)

    def _validate(self, config: WindowConfig) -> None:
        pass

    @abstractmethod
    def item_offset(self, config: WindowConfig, index: int, instance: Any) -> float:
        """Leading edge of item *index*."""

    @abstractmethod
    def item_size(self, config: WindowConfig, index: int, instance: Any) -> float:
        """Extent of item *index* along the scroll axis."""

    @abstractmethod
    def estimated_total_extent(self, config: WindowConfig, instance: Any) -> float:
        """Best known extent of the whole list."""

    @abstractmethod
    def start_index_for_offset(self, config: WindowConfig, offset: float, instance: Any) -> int:
        """First index whose extent includes or follows *offset*."""

    @abstractmethod
    def stop_index_for_start_index(
        self,
        config: WindowConfig,
        start_index: int,
        scroll_offset: float,
        instance: Any,
    ) -> int:
        """Last index visible when the viewport begins at *scroll_offset*."""

    @abstractmethod
    def offset_for_index_and_alignment(
        self,
        config: WindowConfig,
        index: int,
        align: ScrollAlign,
        scroll_offset: float,
        instance: Any,
    ) -> float:
        """Scroll offset that brings *index* into view under *align*."""


def resolve_alignment(
    align: ScrollAlign,
    scroll_offset: float,
    min_offset: float,
    max_offset: float,
) -> float:
    """Pick the target offset between *min_offset* and *max_offset*.

    ``auto`` keeps the current offset when the item is already fully
    visible and otherwise snaps to the nearer edge.
    """

    align = ScrollAlign(align)
    if align == ScrollAlign.START:
        return max_offset
    if align == ScrollAlign.END:
        return min_offset
    if align == ScrollAlign.CENTER:
        return round_half_up(min_offset + (max_offset - min_offset) / 2)
    if min_offset <= scroll_offset <= max_offset:
        return scroll_offset
    if scroll_offset - min_offset < max_offset - scroll_offset:
        return min_offset
    return max_offset


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
