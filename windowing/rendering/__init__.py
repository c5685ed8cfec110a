"""Renderer handoff helpers."""

from windowing.rendering.placement import item_rects, placement_array, window_snapshot

__all__ = ["item_rects", "placement_array", "window_snapshot"]
