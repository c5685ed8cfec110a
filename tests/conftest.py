from __future__ import annotations

import pytest

from windowing.runtime.config import reset_runtime_config

_ENV_KEYS = (
    "WINDOWING_DEFAULT_OVERSCAN",
    "WINDOWING_METRICS_ENABLED",
    "WINDOWING_METRICS_WINDOW_SIZE",
    "WINDOWING_LOG_LEVEL",
    "WINDOWING_LOG_FORMAT",
    "WINDOWING_LOG_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_runtime_config(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_runtime_config()
    yield
    reset_runtime_config()

