"""Layout strategies mapping item indices to scroll-axis positions."""

from .base import LayoutStrategy, resolve_alignment
from .heterogeneous import HeterogeneousLayout, ItemMetadata, MeasurementCache
from .uniform import UniformLayout

__all__ = [
    "HeterogeneousLayout",
    "ItemMetadata",
    "LayoutStrategy",
    "MeasurementCache",
    "UniformLayout",
    "resolve_alignment",
]
