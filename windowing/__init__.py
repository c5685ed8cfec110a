"""Virtual-scrolling window computation for uniform-extent lists."""

from windowing.api.windowing import (
    VirtualItem,
    VirtualizationConfig,
    Window,
    create_virtualization_config,
)
from windowing.runtime.errors import WindowingConfigError, WindowingError, WindowingInputError
from windowing.ui_runtime.list_viewport import compute_window, scroll_to_index
from windowing.ui_runtime.scroll import ScrollSession

__all__ = [
    "ScrollSession",
    "VirtualItem",
    "VirtualizationConfig",
    "Window",
    "WindowingConfigError",
    "WindowingError",
    "WindowingInputError",
    "compute_window",
    "create_virtualization_config",
    "scroll_to_index",
]
