"""Centralized runtime configuration for the windowing library."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class WindowingLogConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class WindowingMetricsConfig:
    enabled: bool
    window_size: int


@dataclass(frozen=True, slots=True)
class WindowingRuntimeConfig:
    default_overscan: int
    metrics: WindowingMetricsConfig
    logging: WindowingLogConfig


_RUNTIME_CONFIG: ContextVar[WindowingRuntimeConfig | None] = ContextVar(
    "windowing_runtime_config", default=None
)


_TRUTHY = frozenset({"1", "true", "yes", "on"})
_LOG_FORMATS = frozenset({"text", "json"})


def _lookup(name: str, env: Mapping[str, str] | None) -> str | None:
    """Return the stripped value of ``name``; blank counts as unset."""
    value = (os.environ if env is None else env).get(name)
    if value is None:
        return None
    return value.strip() or None


def _flag(name: str, env: Mapping[str, str] | None) -> bool:
    value = _lookup(name, env)
    return value is not None and value.lower() in _TRUTHY


def _bounded_int(name: str, default: int, minimum: int, env: Mapping[str, str] | None) -> int:
    value = _lookup(name, env)
    try:
        parsed = default if value is None else int(value)
    except ValueError:
        parsed = default
    return max(minimum, parsed)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with library-prefixed override."""
    value = _lookup("WINDOWING_LOG_LEVEL", env) or _lookup("LOG_LEVEL", env) or default
    return value.upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> WindowingRuntimeConfig:
    log_format = (_lookup("WINDOWING_LOG_FORMAT", env) or "text").lower()
    return WindowingRuntimeConfig(
        default_overscan=_bounded_int("WINDOWING_DEFAULT_OVERSCAN", 3, 0, env),
        metrics=WindowingMetricsConfig(
            enabled=_flag("WINDOWING_METRICS_ENABLED", env),
            window_size=_bounded_int("WINDOWING_METRICS_WINDOW_SIZE", 60, 1, env),
        ),
        logging=WindowingLogConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=log_format if log_format in _LOG_FORMATS else "text",
            file_path=_lookup("WINDOWING_LOG_FILE", env),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> WindowingRuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: WindowingRuntimeConfig) -> WindowingRuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def reset_runtime_config() -> None:
    _RUNTIME_CONFIG.set(None)


def get_runtime_config() -> WindowingRuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "WindowingLogConfig",
    "WindowingMetricsConfig",
    "WindowingRuntimeConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "reset_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
