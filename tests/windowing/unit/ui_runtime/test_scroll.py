from __future__ import annotations

import pytest

from windowing.runtime.errors import WindowingConfigError, WindowingInputError
from windowing.runtime.metrics import NoopMetricsCollector, WindowMetricsCollector
from windowing.ui_runtime.scroll import ScrollSession, apply_wheel_scroll


def test_apply_wheel_scroll_up_and_down() -> None:
    assert apply_wheel_scroll(dy=-30.0, current_offset=100.0, max_offset=500.0).next_offset == 70.0
    assert apply_wheel_scroll(dy=30.0, current_offset=100.0, max_offset=500.0).next_offset == 130.0


def test_apply_wheel_scroll_clamps_to_bounds() -> None:
    assert apply_wheel_scroll(dy=-30.0, current_offset=10.0, max_offset=500.0).next_offset == 0.0
    assert apply_wheel_scroll(dy=30.0, current_offset=490.0, max_offset=500.0).next_offset == 500.0


def test_apply_wheel_scroll_noop_when_blocked() -> None:
    up_blocked = apply_wheel_scroll(dy=-1.0, current_offset=0.0, max_offset=500.0)
    down_blocked = apply_wheel_scroll(dy=1.0, current_offset=500.0, max_offset=500.0)
    assert not up_blocked.handled and up_blocked.next_offset == 0.0
    assert not down_blocked.handled and down_blocked.next_offset == 500.0


def test_session_recomputes_only_on_read(list_config) -> None:
    metrics = WindowMetricsCollector()
    session = ScrollSession(100, list_config, metrics=metrics)
    for offset in (100, 400, 700, 1000):
        session.scroll_to(offset)

    window = session.window()

    assert (window.start_index, window.end_index) == (17, 33)
    snapshot = metrics.snapshot()
    assert snapshot.offset_writes == 4
    assert snapshot.recomputations == 1
    assert snapshot.coalesced_writes == 3
    assert snapshot.last_window_size == 17


def test_session_reuses_window_until_inputs_change(list_config) -> None:
    metrics = WindowMetricsCollector()
    session = ScrollSession(100, list_config, metrics=metrics)
    first = session.window()
    session.scroll_to(0)
    assert session.window() is first
    assert metrics.snapshot().recomputations == 1

    session.scroll_to(50)
    assert session.window() is not first
    assert metrics.snapshot().recomputations == 2


def test_session_scroll_by_respects_content_bounds(list_config) -> None:
    session = ScrollSession(12, list_config, metrics=NoopMetricsCollector())
    assert session.max_offset == 100.0
    assert session.scroll_by(80).handled
    assert session.scroll_by(80).next_offset == 100.0
    assert not session.scroll_by(10).handled
    assert session.offset == 100.0


def test_session_scroll_to_index(list_config) -> None:
    session = ScrollSession(100, list_config, metrics=NoopMetricsCollector())
    assert session.scroll_to_index(20) == 1000
    assert session.offset == 1000
    assert session.window().start_index == 17


def test_session_scroll_to_index_clamps_on_request(list_config) -> None:
    session = ScrollSession(100, list_config, metrics=NoopMetricsCollector())
    assert session.scroll_to_index(99) == 4950
    assert session.scroll_to_index(99, clamp=True) == 4500
    assert session.window().end_index == 99


def test_session_resize_replaces_viewport(list_config) -> None:
    session = ScrollSession(100, list_config, metrics=NoopMetricsCollector())
    assert session.window().end_index == 13
    session.resize(1000)
    assert session.config.viewport_extent == 1000.0
    assert session.config.overscan == 3
    assert session.window().end_index == 23


def test_session_resize_rejects_zero_viewport(list_config) -> None:
    session = ScrollSession(100, list_config, metrics=NoopMetricsCollector())
    with pytest.raises(WindowingConfigError):
        session.resize(0)
    assert session.config == list_config


def test_session_item_count_change_invalidates_window(list_config) -> None:
    session = ScrollSession(100, list_config, metrics=NoopMetricsCollector())
    session.scroll_to(1000)
    assert session.window().end_index == 33
    session.set_item_count(20)
    assert session.item_count == 20
    assert (session.window().start_index, session.window().end_index) == (17, 19)
    session.set_item_count(0)
    assert session.window().is_empty


def test_session_rejects_invalid_inputs(list_config) -> None:
    with pytest.raises(WindowingInputError):
        ScrollSession(-5, list_config)
    session = ScrollSession(5, list_config)
    with pytest.raises(WindowingInputError):
        session.scroll_to(float("inf"))


def test_session_uses_runtime_metrics_setting(monkeypatch, list_config) -> None:
    monkeypatch.setenv("WINDOWING_METRICS_ENABLED", "1")
    session = ScrollSession(100, list_config)
    session.scroll_to(300)
    session.window()
    assert session.metrics_snapshot().recomputations == 1


def test_session_metrics_disabled_by_default(list_config) -> None:
    session = ScrollSession(100, list_config)
    session.window()
    assert session.metrics_snapshot().recomputations == 0


def test_session_window_at_negative_offset_starts_at_first_item(list_config) -> None:
    session = ScrollSession(100, list_config)
    session.scroll_to(-10_000)
    window = session.window()
    assert (window.start_index, window.end_index) == (0, 13)
    assert session.offset == -10_000
