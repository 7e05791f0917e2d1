"""Tests for the PySide6 timer, scroll surface and signal relay."""

from __future__ import annotations

import pytest

pytest.importorskip(
    "PySide6",
    reason="PySide6 is required for UI tests",
    exc_type=ImportError,
)

from PySide6.QtCore import QRectF
from PySide6.QtWidgets import QAbstractScrollArea

from scrollwindow.config import DEBOUNCE_INTERVAL_MS
from scrollwindow.domain.models import Axis, ItemPlacement, WindowConfig
from scrollwindow.engine import ListWindow, ManualDebounceTimer
from scrollwindow.gui import ListWindowSignals, QtDebounceTimer, QtScrollSurface, placement_rect
from scrollwindow.layout import HeterogeneousLayout, UniformLayout


@pytest.fixture
def area(qtbot):
    widget = QAbstractScrollArea()
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def manual_window(uniform_config, timer):
    window = ListWindow(uniform_config, UniformLayout(), timer=timer, clock=timer.clock)
    yield window
    window.dispose()


class TestQtDebounceTimer:
    def test_fires_once(self, qtbot):
        timer = QtDebounceTimer()
        calls = []
        timer.start(10, lambda: calls.append("fired"))
        assert timer.is_active
        qtbot.waitUntil(lambda: calls == ["fired"], timeout=1000)
        assert not timer.is_active

    def test_restart_replaces_callback(self, qtbot):
        timer = QtDebounceTimer()
        calls = []
        timer.start(50, lambda: calls.append("first"))
        timer.start(10, lambda: calls.append("second"))
        qtbot.wait(150)
        assert calls == ["second"]

    def test_stop_cancels(self, qtbot):
        timer = QtDebounceTimer()
        calls = []
        timer.start(10, lambda: calls.append("fired"))
        timer.stop()
        qtbot.wait(60)
        assert calls == []
        assert not timer.is_active


def test_window_defaults_to_qt_timer(qtbot, uniform_config):
    window = ListWindow(uniform_config, UniformLayout())
    window.mount()
    window.on_scroll(60)
    assert window.is_scrolling
    qtbot.waitUntil(lambda: not window.is_scrolling, timeout=2000)
    assert len(window.placement_cache) == 0
    window.dispose()


class TestQtScrollSurface:
    def test_mount_sizes_scroll_bar(self, area, manual_window):
        surface = QtScrollSurface(area, manual_window)
        manual_window.mount(surface)
        bar = surface.scroll_bar
        assert bar is area.verticalScrollBar()
        assert (bar.minimum(), bar.maximum()) == (0, 2850)
        assert bar.pageStep() == 150

    def test_scroll_bar_movement_feeds_window(self, area, manual_window):
        surface = QtScrollSurface(area, manual_window)
        manual_window.mount(surface)
        surface.scroll_bar.setValue(90)
        assert manual_window.state.scroll_offset == 90
        assert manual_window.is_scrolling
        assert manual_window.render_range().visible_start_index == 3

    def test_programmatic_scroll_moves_bar_without_echo(self, area, manual_window):
        surface = QtScrollSurface(area, manual_window)
        manual_window.mount(surface)
        manual_window.scroll_to_item(10, "start")
        assert surface.scroll_bar.value() == 300
        assert manual_window.state.scroll_update_was_requested is True
        assert manual_window.is_scrolling is False

    def test_horizontal_window_uses_horizontal_bar(self, area):
        timer = ManualDebounceTimer()
        config = WindowConfig(item_count=20, item_size=50, axis=Axis.HORIZONTAL, width=200, height="100%")
        with ListWindow(config, UniformLayout(), timer=timer, clock=timer.clock) as window:
            surface = QtScrollSurface(area, window)
            window.mount(surface)
            assert surface.scroll_bar is area.horizontalScrollBar()
            assert surface.scroll_bar.maximum() == 800
            surface.scroll_bar.setValue(120)
            assert window.state.scroll_offset == 120

    def test_scroll_bar_range_grows_with_measured_items(self, area, timer):
        config = WindowConfig(
            item_count=100,
            item_size=lambda index: 100,
            height=150,
            width="100%",
            estimated_item_size=10,
        )
        with ListWindow(config, HeterogeneousLayout(), timer=timer, clock=timer.clock) as window:
            surface = QtScrollSurface(area, window)
            window.mount(surface)
            bar = surface.scroll_bar
            # Items 0..3 are measured by the first render: 400 + 96 * 10.
            assert bar.maximum() == 1360 - 150

            bar.setValue(bar.maximum())
            timer.advance(DEBOUNCE_INTERVAL_MS)
            assert bar.maximum() == int(window.estimated_total_extent() - 150)
            assert bar.maximum() > 1360 - 150

    def test_dispose_detaches_from_bar(self, area, manual_window):
        surface = QtScrollSurface(area, manual_window)
        manual_window.mount(surface)
        manual_window.dispose()
        surface.scroll_bar.setValue(200)
        assert manual_window.state.scroll_offset == 0

    def test_destroying_area_disposes_window(self, qtbot, manual_window):
        doomed = QAbstractScrollArea()
        surface = QtScrollSurface(doomed, manual_window)
        manual_window.mount(surface)
        manual_window.on_scroll(60)
        doomed.deleteLater()
        qtbot.waitUntil(lambda: manual_window.disposed, timeout=1000)


def test_signals_relay_engine_notifications(qtbot, manual_window):
    manual_window.mount()
    signals = ListWindowSignals(manual_window)
    with qtbot.waitSignal(signals.itemsRendered, timeout=1000) as rendered:
        manual_window.on_scroll(60)
    assert rendered.args == [1, 8, 2, 6]

    with qtbot.waitSignal(signals.scrolled, timeout=1000) as scrolled:
        manual_window.scroll_to(300)
    assert scrolled.args == ["forward", 300.0, True]


def test_placement_rect():
    vertical = ItemPlacement(axis=Axis.VERTICAL, offset=60, size=30)
    horizontal = ItemPlacement(axis=Axis.HORIZONTAL, offset=60, size=30)
    assert placement_rect(vertical, 200) == QRectF(0, 60, 200, 30)
    assert placement_rect(horizontal, 80) == QRectF(60, 0, 30, 80)
