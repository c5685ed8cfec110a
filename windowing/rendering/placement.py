"""Renderer-facing placement builders for a computed window."""

from __future__ import annotations

from typing import Literal

import numpy as np

from windowing.api.windowing import Window
from windowing.ui_runtime.geometry import Rect

Axis = Literal["vertical", "horizontal"]


def placement_array(window: Window) -> np.ndarray:
    """Build an ``(n, 2)`` array of ``[index, offset]`` rows."""
    if window.is_empty:
        return np.empty((0, 2), dtype=np.float64)
    indices = np.arange(window.start_index, window.end_index + 1, dtype=np.float64)
    return np.column_stack((indices, indices * window.item_extent))


def item_rects(window: Window, *, cross_extent: float, axis: Axis = "vertical") -> list[Rect]:
    """Return one rectangle per materialized item along the scroll axis."""
    extent = window.item_extent
    if axis == "vertical":
        return [Rect(0.0, item.offset, float(cross_extent), extent) for item in window]
    if axis == "horizontal":
        return [Rect(item.offset, 0.0, extent, float(cross_extent)) for item in window]
    raise ValueError(f"unknown axis: {axis!r}")


def window_snapshot(window: Window) -> dict[str, object]:
    """Return a JSON-ready description of the window."""
    return {
        "item_count": window.item_count,
        "start_index": window.start_index,
        "end_index": window.end_index,
        "item_extent": window.item_extent,
        "total_extent": window.total_extent,
        "items": [{"index": item.index, "offset": item.offset} for item in window],
    }


__all__ = ["Axis", "item_rects", "placement_array", "window_snapshot"]
