"""Observability layer: structured logging and per-stream counters."""

from .logging import StreamLogger
from .metrics import StreamMetrics

__all__ = [
    "StreamLogger",
    "StreamMetrics",
]
