"""Public windowing contracts consumed by scroll sources and renderers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from windowing.runtime.errors import require_overscan, require_positive_extent


@dataclass(frozen=True, slots=True)
class VirtualizationConfig:
    """Uniform-extent layout description for one windowing session.

    ``item_extent`` and ``viewport_extent`` are measured along the scroll axis
    in the same units as the scroll offset. ``overscan`` is the number of extra
    items materialized on each side of the visible range.
    """

    item_extent: float
    viewport_extent: float
    overscan: int = 3

    def __post_init__(self) -> None:
        item_extent = require_positive_extent("item_extent", self.item_extent)
        viewport_extent = require_positive_extent("viewport_extent", self.viewport_extent)
        object.__setattr__(self, "item_extent", item_extent)
        object.__setattr__(self, "viewport_extent", viewport_extent)
        object.__setattr__(self, "overscan", require_overscan(self.overscan))

    def with_viewport_extent(self, viewport_extent: float) -> VirtualizationConfig:
        """Return config for a resized container."""
        return replace(self, viewport_extent=viewport_extent)


@dataclass(frozen=True, slots=True)
class VirtualItem:
    """One materialized item and its leading-edge offset."""

    index: int
    offset: float


@dataclass(frozen=True, slots=True)
class Window:
    """Materialized slice ``[start_index, end_index]`` of a uniform list.

    An empty window has ``end_index == start_index - 1``. Iteration is
    restartable: every pass yields the same items in ascending index order.
    """

    item_count: int
    start_index: int
    end_index: int
    item_extent: float

    @property
    def total_extent(self) -> float:
        return self.item_count * self.item_extent

    @property
    def is_empty(self) -> bool:
        return self.end_index < self.start_index

    @property
    def indices(self) -> tuple[VirtualItem, ...]:
        return tuple(self)

    def offset_of(self, index: int) -> float:
        return index * self.item_extent

    def __iter__(self) -> Iterator[VirtualItem]:
        for index in range(self.start_index, self.end_index + 1):
            yield VirtualItem(index=index, offset=index * self.item_extent)

    def __len__(self) -> int:
        return max(0, self.end_index - self.start_index + 1)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start_index <= index <= self.end_index


def empty_window(item_extent: float) -> Window:
    return Window(item_count=0, start_index=0, end_index=-1, item_extent=float(item_extent))


def create_virtualization_config(
    item_extent: float,
    viewport_extent: float,
    overscan: int | None = None,
) -> VirtualizationConfig:
    """Build config, falling back to the runtime default overscan."""
    if overscan is None:
        from windowing.runtime.config import get_runtime_config

        overscan = get_runtime_config().default_overscan
    return VirtualizationConfig(
        item_extent=item_extent,
        viewport_extent=viewport_extent,
        overscan=overscan,
    )


__all__ = [
    "VirtualItem",
    "VirtualizationConfig",
    "Window",
    "create_virtualization_config",
    "empty_window",
]
