"""Memoised item placements keyed by index."""

from __future__ import annotations

from typing import Any, Callable

from ..domain.models import ItemPlacement, WindowConfig
from ..layout.base import LayoutStrategy


class PlacementCache:
    """Index to :class:`ItemPlacement` mapping with whole-cache invalidation.

    Returning the same object for an index lets item consumers skip
    re-rendering while the list scrolls.  Entries are only ever added or
    dropped all at once by :meth:`clear`.
    """

    def __init__(
        self,
        layout: LayoutStrategy,
        config_getter: Callable[[], WindowConfig],
        instance: Any,
    ) -> None:
        self._layout = layout
        self._config_getter = config_getter
        self._instance = instance
        self._placements: dict[int, ItemPlacement] = {}

    def placement(self, index: int) -> ItemPlacement:
        placement = self._placements.get(index)
        if placement is None:
            config = self._config_getter()
            placement = ItemPlacement(
                axis=config.axis,
                offset=self._layout.item_offset(config, index, self._instance),
                size=self._layout.item_size(config, index, self._instance),
            )
            self._placements[index] = placement
        return placement

    def clear(self) -> None:
        self._placements = {}

    def __len__(self) -> int:
        return len(self._placements)

    def __contains__(self, index: object) -> bool:
        return index in self._placements
