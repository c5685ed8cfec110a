"""Public windowing API contracts."""

from windowing.api.logging import WindowingLoggingConfig
from windowing.api.windowing import (
    VirtualItem,
    VirtualizationConfig,
    Window,
    create_virtualization_config,
    empty_window,
)

__all__ = [
    "VirtualItem",
    "VirtualizationConfig",
    "Window",
    "WindowingLoggingConfig",
    "create_virtualization_config",
    "empty_window",
]
