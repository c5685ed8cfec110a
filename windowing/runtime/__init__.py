"""Windowing runtime modules."""

from windowing.runtime.config import WindowingRuntimeConfig, get_runtime_config, load_runtime_config
from windowing.runtime.errors import WindowingConfigError, WindowingError, WindowingInputError
from windowing.runtime.metrics import (
    NoopMetricsCollector,
    WindowMetricsCollector,
    WindowMetricsSnapshot,
    create_metrics_collector,
)

__all__ = [
    "NoopMetricsCollector",
    "WindowMetricsCollector",
    "WindowMetricsSnapshot",
    "WindowingConfigError",
    "WindowingError",
    "WindowingInputError",
    "WindowingRuntimeConfig",
    "create_metrics_collector",
    "get_runtime_config",
    "load_runtime_config",
]
