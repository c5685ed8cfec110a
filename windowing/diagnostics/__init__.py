"""Diagnostics encoding helpers."""

from windowing.diagnostics.json_codec import dumps_bytes, dumps_text, loads

__all__ = ["dumps_bytes", "dumps_text", "loads"]
