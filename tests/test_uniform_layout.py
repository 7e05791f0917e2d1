"""Tests for UniformLayout: closed-form fixed-size mappings."""

from __future__ import annotations

import pytest

import scrollwindow.config as sw_config
from scrollwindow.domain.models import ScrollAlign
from scrollwindow.errors import ConfigurationError
from scrollwindow.layout import UniformLayout


@pytest.fixture
def layout():
    return UniformLayout()


def test_offsets_sizes_and_total(layout, uniform_config):
    assert layout.init_instance(uniform_config) is None
    assert layout.item_offset(uniform_config, 7, None) == 210
    assert layout.item_size(uniform_config, 7, None) == 30
    assert layout.estimated_total_extent(uniform_config, None) == 3000


@pytest.mark.parametrize(
    ("offset", "expected"),
    [(0, 0), (29, 0), (30, 1), (45, 1), (10_000, 99)],
)
def test_start_index_for_offset_is_clamped(layout, uniform_config, offset, expected):
    assert layout.start_index_for_offset(uniform_config, offset, None) == expected


def test_stop_index_covers_the_viewport(layout, uniform_config):
    assert layout.stop_index_for_start_index(uniform_config, 0, 0, None) == 4
    # Viewport 45..195 touches items 1 through 6.
    assert layout.stop_index_for_start_index(uniform_config, 1, 45, None) == 6


def test_stop_index_is_clamped_to_last_item(layout, uniform_config):
    assert layout.stop_index_for_start_index(uniform_config, 99, 2970, None) == 99


def test_empty_list_maps_to_index_zero(layout, uniform_config):
    config = uniform_config.replace(item_count=0)
    assert layout.start_index_for_offset(config, 120, None) == 0
    assert layout.stop_index_for_start_index(config, 0, 120, None) == 0
    assert layout.estimated_total_extent(config, None) == 0


@pytest.mark.parametrize(
    ("align", "scroll_offset", "expected"),
    [
        (ScrollAlign.START, 0, 300),
        (ScrollAlign.END, 0, 180),
        (ScrollAlign.CENTER, 0, 240),
        # Item 10 below the viewport: auto snaps to the end edge.
        (ScrollAlign.AUTO, 0, 180),
        # Already fully visible: auto keeps the offset.
        (ScrollAlign.AUTO, 200, 200),
        # Item 10 above the viewport: auto snaps to the start edge.
        (ScrollAlign.AUTO, 1000, 300),
        ("start", 0, 300),
    ],
)
def test_offset_for_index_and_alignment(layout, uniform_config, align, scroll_offset, expected):
    assert layout.offset_for_index_and_alignment(uniform_config, 10, align, scroll_offset, None) == expected


def test_start_alignment_stops_at_last_page(layout, uniform_config):
    assert layout.offset_for_index_and_alignment(uniform_config, 99, ScrollAlign.START, 0, None) == 2850


def test_validate_rejects_non_numeric_item_size(layout, uniform_config):
    with pytest.raises(ConfigurationError, match="item_size"):
        layout.validate(uniform_config.replace(item_size="30"))
    with pytest.raises(ConfigurationError, match="positive"):
        layout.validate(uniform_config.replace(item_size=0))


def test_validate_is_skipped_in_production(layout, uniform_config, monkeypatch):
    monkeypatch.setattr(sw_config, "VALIDATION_ENABLED", False)
    layout.validate(uniform_config.replace(item_size="30"))
