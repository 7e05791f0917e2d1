"""Typer-based CLI for inspecting windowed ranges without a GUI."""

from __future__ import annotations

import functools
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from .config import DEBOUNCE_INTERVAL_MS
from .domain.models import Axis, ScrollAlign, WindowConfig
from .engine import ListWindow, ManualDebounceTimer
from .errors import ConfigurationError, ScrollWindowError
from .layout import HeterogeneousLayout, LayoutStrategy, UniformLayout

app = typer.Typer(help="Inspect which items a windowed list renders while it scrolls")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as exc:
            print(f"[red]Invalid configuration: {escape(str(exc))}")
            raise typer.Exit(2) from exc
        except ScrollWindowError as exc:
            print(f"[red]Unexpected error: {escape(str(exc))}")
            raise typer.Exit(1) from exc

    return wrapper


def _parse_sizes(pattern: str) -> list[float]:
    try:
        sizes = [float(part) for part in pattern.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(f"expected comma separated numbers, got {pattern!r}") from exc
    if not sizes or any(size <= 0 for size in sizes):
        raise typer.BadParameter("sizes must be positive")
    return sizes


def _build(
    count: int,
    item_size: float,
    viewport: float,
    overscan: int,
    axis: Axis,
    adjusted: bool,
    size_pattern: Optional[str],
) -> tuple[WindowConfig, LayoutStrategy]:
    extents = {"height": viewport, "width": "100%"}
    if axis == Axis.HORIZONTAL:
        extents = {"height": "100%", "width": viewport}
    layout: LayoutStrategy = UniformLayout()
    size: object = item_size
    if size_pattern:
        sizes = _parse_sizes(size_pattern)
        layout = HeterogeneousLayout()
        size = lambda index: sizes[index % len(sizes)]  # noqa: E731
    config = WindowConfig(
        item_count=count,
        item_size=size,
        axis=axis,
        overscan_count=overscan,
        use_adjusted_offsets=adjusted,
        use_is_scrolling=True,
        estimated_item_size=item_size,
        **extents,
    )
    return config, layout


def _add_row(table: Table, label: str, window: ListWindow) -> None:
    render_range = window.render_range()
    state = window.state
    table.add_row(
        label,
        f"{state.scroll_offset:g}",
        state.scroll_direction.value,
        "yes" if state.is_scrolling else "no",
        f"{render_range.visible_start_index}-{render_range.visible_stop_index}",
        f"{render_range.overscan_start_index}-{render_range.overscan_stop_index}",
        f"{window.estimated_total_extent():g}",
    )


@app.command()
@_handle_errors
def simulate(
    offset: Optional[list[float]] = typer.Option(None, "--offset", "-o", help="Raw scroll offsets, in order."),
    count: int = typer.Option(1000, help="Number of items."),
    item_size: float = typer.Option(35.0, help="Item size (estimate when --sizes is given)."),
    viewport: float = typer.Option(300.0, help="Viewport extent along the scroll axis."),
    overscan: int = typer.Option(2, help="Extra items in the direction of travel."),
    axis: Axis = typer.Option(Axis.VERTICAL, help="Scroll axis."),
    adjusted: bool = typer.Option(False, "--adjusted/--no-adjusted", help="Compensate for scroll drift."),
    step_ms: float = typer.Option(16.0, help="Simulated time between scroll events."),
    sizes: Optional[str] = typer.Option(None, help="Comma separated sizes cycled over items."),
) -> None:
    """Replay scroll offsets and print the rendered range after each one."""

    config, layout = _build(count, item_size, viewport, overscan, axis, adjusted, sizes)
    timer = ManualDebounceTimer()
    table = Table(title=f"{count} items, {axis.value}, viewport {viewport:g}")
    for column in ("event", "offset", "direction", "scrolling", "visible", "overscan", "extent"):
        table.add_column(column)

    with ListWindow(config, layout, timer=timer, clock=timer.clock) as window:
        window.mount()
        _add_row(table, "mount", window)
        for value in offset or []:
            timer.advance(step_ms)
            window.on_scroll(value)
            _add_row(table, f"t={timer.now_ms:g}ms", window)
        timer.advance(DEBOUNCE_INTERVAL_MS)
        _add_row(table, f"settled t={timer.now_ms:g}ms", window)
    print(table)


@app.command()
@_handle_errors
def align(
    index: int = typer.Argument(..., help="Item to scroll to."),
    scroll_offset: float = typer.Option(0.0, help="Offset before scrolling."),
    count: int = typer.Option(1000, help="Number of items."),
    item_size: float = typer.Option(35.0, help="Item size (estimate when --sizes is given)."),
    viewport: float = typer.Option(300.0, help="Viewport extent along the scroll axis."),
    sizes: Optional[str] = typer.Option(None, help="Comma separated sizes cycled over items."),
) -> None:
    """Print the scroll offset each alignment picks for INDEX."""

    config, layout = _build(count, item_size, viewport, 2, Axis.VERTICAL, False, sizes)
    config = config.replace(initial_scroll_offset=scroll_offset)
    table = Table(title=f"Scrolling to item {index} from {scroll_offset:g}")
    table.add_column("align")
    table.add_column("offset")
    table.add_column("visible")
    for mode in ScrollAlign:
        timer = ManualDebounceTimer()
        with ListWindow(config, layout, timer=timer, clock=timer.clock) as window:
            window.scroll_to_item(index, mode)
            render_range = window.render_range()
            table.add_row(
                mode.value,
                f"{window.state.scroll_offset:g}",
                f"{render_range.visible_start_index}-{render_range.visible_stop_index}",
            )
    print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
