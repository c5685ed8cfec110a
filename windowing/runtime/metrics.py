"""Lightweight counters for scroll-session recomputation diagnostics."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WindowMetricsSnapshot:
    """Read-only snapshot consumable by loggers and the window CLI."""

    offset_writes: int
    recomputations: int
    coalesced_writes: int
    last_window_size: int
    rolling_window_size: float


class NoopMetricsCollector:
    """No-op collector for zero-impact disabled mode."""

    def record_offset_write(self) -> None:
        return None

    def record_recompute(self, window_size: int) -> None:
        _ = window_size

    def snapshot(self) -> WindowMetricsSnapshot:
        return WindowMetricsSnapshot(
            offset_writes=0,
            recomputations=0,
            coalesced_writes=0,
            last_window_size=0,
            rolling_window_size=0.0,
        )


class WindowMetricsCollector:
    """Small in-memory rolling collector."""

    def __init__(self, *, window_size: int = 60) -> None:
        self._window_size = max(1, int(window_size))
        self._sizes: deque[int] = deque(maxlen=self._window_size)
        self._offset_writes = 0
        self._recomputations = 0
        self._coalesced_writes = 0
        self._pending_writes = 0

    def record_offset_write(self) -> None:
        self._offset_writes += 1
        self._pending_writes += 1

    def record_recompute(self, window_size: int) -> None:
        self._recomputations += 1
        # One pending write is consumed by this recompute; the rest were dropped.
        if self._pending_writes > 1:
            self._coalesced_writes += self._pending_writes - 1
        self._pending_writes = 0
        self._sizes.append(int(window_size))

    def snapshot(self) -> WindowMetricsSnapshot:
        rolling = (sum(self._sizes) / len(self._sizes)) if self._sizes else 0.0
        return WindowMetricsSnapshot(
            offset_writes=self._offset_writes,
            recomputations=self._recomputations,
            coalesced_writes=self._coalesced_writes,
            last_window_size=self._sizes[-1] if self._sizes else 0,
            rolling_window_size=rolling,
        )


def create_metrics_collector(
    *, enabled: bool, window_size: int = 60
) -> WindowMetricsCollector | NoopMetricsCollector:
    """Factory returning enabled collector or no-op implementation."""
    if not enabled:
        return NoopMetricsCollector()
    return WindowMetricsCollector(window_size=window_size)


__all__ = [
    "NoopMetricsCollector",
    "WindowMetricsCollector",
    "WindowMetricsSnapshot",
    "create_metrics_collector",
]
