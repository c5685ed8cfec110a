"""Uniform-extent list windowing for virtual scrolling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from windowing.api.windowing import VirtualItem, VirtualizationConfig, Window, empty_window
from windowing.runtime.errors import require_index, require_item_count, require_scroll_offset


def compute_window(item_count: int, config: VirtualizationConfig, scroll_offset: float) -> Window:
    """Return the materialized item range for one scroll offset.

    Runs in constant time regardless of ``item_count``. Negative offsets read
    as the top of the list. When the offset lies past the end of the content,
    the start index is pinned to the last item so the window never inverts.
    """
    count = require_item_count(item_count)
    offset = require_scroll_offset(scroll_offset)
    if count == 0:
        return empty_window(config.item_extent)

    # Every offset at or beyond this bound yields the pinned last-item window.
    pinned_offset = (count + config.overscan) * config.item_extent
    offset = min(max(0.0, offset), pinned_offset)
    raw_start = math.floor(offset / config.item_extent)
    trailing = (offset + config.viewport_extent) / config.item_extent
    raw_end = math.ceil(trailing) if math.isfinite(trailing) else count
    end_index = min(count - 1, raw_end + config.overscan)
    start_index = min(max(0, raw_start - config.overscan), end_index)
    return Window(
        item_count=count,
        start_index=start_index,
        end_index=end_index,
        item_extent=config.item_extent,
    )


def scroll_to_index(index: int, config: VirtualizationConfig) -> float:
    """Return the scroll offset that puts ``index``'s leading edge at the viewport top."""
    return require_index(index) * config.item_extent


def max_scroll_offset(item_count: int, config: VirtualizationConfig) -> float:
    total_extent = require_item_count(item_count) * config.item_extent
    return max(0.0, total_extent - config.viewport_extent)


def clamp_scroll_offset(
    scroll_offset: float, item_count: int, config: VirtualizationConfig
) -> float:
    """Clamp a scroll offset to valid list viewport bounds."""
    offset = require_scroll_offset(scroll_offset)
    return max(0.0, min(offset, max_scroll_offset(item_count, config)))


def can_scroll_forward(scroll_offset: float, item_count: int, config: VirtualizationConfig) -> bool:
    """Return whether content remains past the trailing edge of the viewport."""
    upper = max_scroll_offset(item_count, config)
    return clamp_scroll_offset(scroll_offset, item_count, config) < upper


T = TypeVar("T")


def visible_slice(items: Sequence[T], window: Window) -> list[tuple[VirtualItem, T]]:
    """Pair each materialized item with its data row, skipping indices outside ``items``."""
    size = len(items)
    return [(virtual, items[virtual.index]) for virtual in window if 0 <= virtual.index < size]


__all__ = [
    "can_scroll_forward",
    "clamp_scroll_offset",
    "compute_window",
    "max_scroll_offset",
    "scroll_to_index",
    "visible_slice",
]
