from __future__ import annotations

import pytest

from windowing.api.windowing import VirtualizationConfig


@pytest.fixture
def list_config() -> VirtualizationConfig:
    return VirtualizationConfig(item_extent=50, viewport_extent=500, overscan=3)
