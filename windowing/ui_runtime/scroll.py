"""Scroll input semantics and the last-write-wins window session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from windowing.api.windowing import VirtualizationConfig, Window
from windowing.runtime.config import get_runtime_config
from windowing.runtime.errors import require_item_count, require_scroll_offset
from windowing.runtime.metrics import (
    NoopMetricsCollector,
    WindowMetricsCollector,
    WindowMetricsSnapshot,
    create_metrics_collector,
)
from windowing.ui_runtime.list_viewport import (
    clamp_scroll_offset,
    compute_window,
    max_scroll_offset,
    scroll_to_index,
)

_LOG = logging.getLogger("windowing.scroll")


@dataclass(frozen=True, slots=True)
class ScrollOutcome:
    """Result of attempting to scroll a list-like viewport."""

    handled: bool
    next_offset: float


def apply_wheel_scroll(dy: float, current_offset: float, max_offset: float) -> ScrollOutcome:
    """Convert a wheel delta into a bounded scroll offset change."""
    upper = max(0.0, float(max_offset))
    current = max(0.0, min(float(current_offset), upper))
    if dy < 0 and current > 0.0:
        return ScrollOutcome(handled=True, next_offset=max(0.0, current + dy))
    if dy > 0 and current < upper:
        return ScrollOutcome(handled=True, next_offset=min(upper, current + dy))
    return ScrollOutcome(handled=False, next_offset=float(current_offset))


class ScrollSession:
    """Tracks the latest scroll inputs and recomputes the window on read.

    Writes never recompute. A read after any number of writes reflects only
    the most recent inputs; intermediate offsets are dropped.
    """

    def __init__(
        self,
        item_count: int,
        config: VirtualizationConfig,
        *,
        scroll_offset: float = 0.0,
        metrics: WindowMetricsCollector | NoopMetricsCollector | None = None,
    ) -> None:
        self._item_count = require_item_count(item_count)
        self._config = config
        self._offset = require_scroll_offset(scroll_offset)
        if metrics is None:
            runtime = get_runtime_config()
            metrics = create_metrics_collector(
                enabled=runtime.metrics.enabled,
                window_size=runtime.metrics.window_size,
            )
        self._metrics = metrics
        self._window: Window | None = None

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def config(self) -> VirtualizationConfig:
        return self._config

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def max_offset(self) -> float:
        return max_scroll_offset(self._item_count, self._config)

    def scroll_to(self, offset: float) -> None:
        value = require_scroll_offset(offset)
        if value == self._offset:
            return
        self._offset = value
        self._window = None
        self._metrics.record_offset_write()

    def scroll_by(self, dy: float) -> ScrollOutcome:
        outcome = apply_wheel_scroll(dy, self._offset, self.max_offset)
        if outcome.handled:
            self.scroll_to(outcome.next_offset)
        return outcome

    def scroll_to_index(self, index: int, *, clamp: bool = False) -> float:
        """Move the viewport so ``index`` starts at its leading edge."""
        target = scroll_to_index(index, self._config)
        if clamp:
            target = clamp_scroll_offset(target, self._item_count, self._config)
        self.scroll_to(target)
        return target

    def resize(self, viewport_extent: float) -> None:
        config = self._config.with_viewport_extent(viewport_extent)
        if config == self._config:
            return
        _LOG.debug(
            "viewport_resized",
            extra={
                "viewport_from": self._config.viewport_extent,
                "viewport_to": config.viewport_extent,
            },
        )
        self._config = config
        self._window = None

    def set_item_count(self, item_count: int) -> None:
        count = require_item_count(item_count)
        if count == self._item_count:
            return
        _LOG.debug("item_count_changed", extra={"count_from": self._item_count, "count_to": count})
        self._item_count = count
        self._window = None

    def window(self) -> Window:
        if self._window is None:
            self._window = compute_window(self._item_count, self._config, self._offset)
            self._metrics.record_recompute(len(self._window))
        return self._window

    def metrics_snapshot(self) -> WindowMetricsSnapshot:
        return self._metrics.snapshot()


__all__ = ["ScrollOutcome", "ScrollSession", "apply_wheel_scroll"]
