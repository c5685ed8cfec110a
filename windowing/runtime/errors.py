"""Windowing error taxonomy and boundary validation helpers."""

from __future__ import annotations

import math
from numbers import Integral


class WindowingError(ValueError):
    """Base error for windowing contract violations."""


class WindowingConfigError(WindowingError):
    """Raised when a virtualization config cannot describe a valid layout."""


class WindowingInputError(WindowingError):
    """Raised when call-site inputs fall outside the windowing contract."""


def require_positive_extent(name: str, value: float) -> float:
    """Return ``value`` as float, rejecting zero, negative and non-finite extents."""
    extent = float(value)
    if not math.isfinite(extent) or extent <= 0.0:
        raise WindowingConfigError(f"{name} must be a finite number > 0, got {value!r}")
    return extent


def _non_negative_int(name: str, value: int, error: type[WindowingError]) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise error(f"{name} must be an integer >= 0, got {value!r}")
    return int(value)


def require_overscan(value: int) -> int:
    return _non_negative_int("overscan", value, WindowingConfigError)


def require_item_count(value: int) -> int:
    return _non_negative_int("item_count", value, WindowingInputError)


def require_index(value: int) -> int:
    return _non_negative_int("index", value, WindowingInputError)


def require_scroll_offset(value: float) -> float:
    offset = float(value)
    if not math.isfinite(offset):
        raise WindowingInputError(f"scroll_offset must be finite, got {value!r}")
    return offset


__all__ = [
    "WindowingConfigError",
    "WindowingError",
    "WindowingInputError",
    "require_index",
    "require_item_count",
    "require_overscan",
    "require_positive_extent",
    "require_scroll_offset",
]
