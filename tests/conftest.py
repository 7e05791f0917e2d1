import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from scrollwindow.domain.models import Axis, WindowConfig  # noqa: E402
from scrollwindow.engine import ListWindow, ManualDebounceTimer  # noqa: E402
from scrollwindow.layout import HeterogeneousLayout, UniformLayout  # noqa: E402


class RecordingSurface:
    """Stand-in for a host container that records programmatic scrolls."""

    def __init__(self) -> None:
        self.writes: list[tuple[Axis, float]] = []
        self.extents: list[float] = []
        self.detached = 0

    def set_scroll_offset(self, axis: Axis, offset: float) -> None:
        self.writes.append((axis, offset))

    def sync_range(self, total_extent: float) -> None:
        self.extents.append(total_extent)

    def detach(self) -> None:
        self.detached += 1


@pytest.fixture
def timer() -> ManualDebounceTimer:
    return ManualDebounceTimer()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def uniform_config() -> WindowConfig:
    # 100 rows of 30px in a 150px viewport: five rows visible at a time.
    return WindowConfig(item_count=100, item_size=30, height=150, width="100%")


@pytest.fixture
def variable_config() -> WindowConfig:
    # Sizes cycle 20, 40, 60 so offsets are easy to compute by hand.
    return WindowConfig(
        item_count=60,
        item_size=lambda index: (20, 40, 60)[index % 3],
        height=100,
        width="100%",
        estimated_item_size=40,
    )


@pytest.fixture
def make_window(timer):
    """Build windows sharing the manual timer as both timer and clock."""

    created: list[ListWindow] = []

    def _make(config: WindowConfig, layout=None, **kwargs) -> ListWindow:
        if layout is None:
            layout = HeterogeneousLayout() if callable(config.item_size) else UniformLayout()
        window = ListWindow(config, layout, timer=timer, clock=timer.clock, **kwargs)
        created.append(window)
        return window

    yield _make
    for window in created:
        window.dispose()
