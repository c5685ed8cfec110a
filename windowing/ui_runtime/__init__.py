"""List viewport and scroll helpers."""

from windowing.ui_runtime.geometry import Rect
from windowing.ui_runtime.list_viewport import (
    can_scroll_forward,
    clamp_scroll_offset,
    compute_window,
    max_scroll_offset,
    scroll_to_index,
    visible_slice,
)
from windowing.ui_runtime.scroll import ScrollOutcome, ScrollSession, apply_wheel_scroll

__all__ = [
    "Rect",
    "ScrollOutcome",
    "ScrollSession",
    "apply_wheel_scroll",
    "can_scroll_forward",
    "clamp_scroll_offset",
    "compute_window",
    "max_scroll_offset",
    "scroll_to_index",
    "visible_slice",
]
