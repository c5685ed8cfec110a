"""Windowing logging implementation."""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from windowing.api.logging import WindowingLoggingConfig
from windowing.diagnostics.json_codec import dumps_text
from windowing.runtime.config import get_runtime_config

_QUEUE_LISTENER: QueueListener | None = None

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


def _build_handlers(config: WindowingLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    if not config.file_path:
        return [console]
    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    sink.setFormatter(_formatter_for(config.file_format))
    return [console, sink]


def configure_windowing_logging(config: WindowingLoggingConfig) -> None:
    """Install handlers on the root logger; file output is drained by a queue listener."""
    global _QUEUE_LISTENER

    stop_windowing_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _QUEUE_LISTENER = QueueListener(records, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def stop_windowing_logging() -> None:
    """Flush and stop the background file listener, if running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_windowing_logging() -> None:
    """Configure logging from runtime config unless the host already did."""
    if logging.getLogger().handlers:
        return
    runtime = get_runtime_config().logging
    configure_windowing_logging(
        WindowingLoggingConfig(
            level_name=runtime.level_name,
            console_format=runtime.console_format,
            file_path=runtime.file_path,
        )
    )


def get_windowing_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "JsonFormatter",
    "configure_windowing_logging",
    "get_windowing_logger",
    "setup_windowing_logging",
    "stop_windowing_logging",
]
