"""Reliability layer: opt-in stream reconnection with resume cursor."""

from .reconnect import CursorTracker, ReconnectConfig, ReconnectingStream, with_cursor

__all__ = [
    "CursorTracker",
    "ReconnectConfig",
    "ReconnectingStream",
    "with_cursor",
]
