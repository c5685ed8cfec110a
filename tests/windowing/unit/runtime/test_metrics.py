from __future__ import annotations

from windowing.runtime.metrics import (
    NoopMetricsCollector,
    WindowMetricsCollector,
    create_metrics_collector,
)


def test_collector_counts_coalesced_writes() -> None:
    collector = WindowMetricsCollector(window_size=2)
    collector.record_offset_write()
    collector.record_offset_write()
    collector.record_offset_write()
    collector.record_recompute(10)
    collector.record_offset_write()
    collector.record_recompute(14)
    collector.record_recompute(20)

    snapshot = collector.snapshot()
    assert snapshot.offset_writes == 4
    assert snapshot.recomputations == 3
    assert snapshot.coalesced_writes == 2
    assert snapshot.last_window_size == 20
    assert snapshot.rolling_window_size == 17.0


def test_noop_collector_reports_zeroes() -> None:
    collector = NoopMetricsCollector()
    collector.record_offset_write()
    collector.record_recompute(12)
    snapshot = collector.snapshot()
    assert snapshot.recomputations == 0
    assert snapshot.rolling_window_size == 0.0


def test_factory_respects_enabled_flag() -> None:
    assert isinstance(create_metrics_collector(enabled=False), NoopMetricsCollector)
    assert isinstance(create_metrics_collector(enabled=True, window_size=5), WindowMetricsCollector)
