"""
Structured logging utility for streaming sessions and requests.

This module provides a consistent logging interface for the client, with
standard fields like resource, url and stream_id prefixed to every message.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Optional

from .metrics import StreamMetrics


class StreamLogger:
    """Structured logger for one Horizon resource family."""

    def __init__(self, resource: str = "stream"):
        """
        Initialize logger for a resource family.

        Args:
            resource: Name of the resource (e.g., "effects", "operations")
        """
        self.resource = resource
        self.logger = logging.getLogger(f"horizon_sdk.streaming.{resource}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"resource={self.resource}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, stream_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, stream_id=stream_id, **kwargs))

    def info(self, message: str, stream_id: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(self._format_message(message, stream_id=stream_id, **kwargs))

    def warning(self, message: str, stream_id: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(self._format_message(message, stream_id=stream_id, **kwargs))

    def error(self, message: str, stream_id: Optional[str] = None,
              error: Optional[BaseException] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(self._format_message(message, stream_id=stream_id, **kwargs))

    @contextmanager
    def track_stream(self, url: str, stream_id: Optional[str] = None):
        """
        Context manager tracking one streaming session.

        Logs the start of the session and its outcome. The yielded
        StreamMetrics is updated by the session; if the body finishes without
        setting an outcome, the session is recorded as completed.

        Args:
            url: The stream URL
            stream_id: Optional identifier (generated if not provided)

        Yields:
            StreamMetrics for the session
        """
        if stream_id is None:
            stream_id = str(uuid.uuid4())[:8]

        metrics = StreamMetrics(url=url, resource=self.resource)
        self.debug("Opening stream", stream_id=stream_id, url=url)

        try:
            yield metrics
        except Exception as e:
            metrics.finish("failed", e)
            self.error(
                "Stream failed",
                stream_id=stream_id,
                url=url,
                duration_ms=metrics.duration_ms,
                error=e,
            )
            raise
        else:
            if metrics.outcome is None:
                metrics.finish("completed")
            if metrics.outcome == "cancelled":
                self.info("Stream cancelled", stream_id=stream_id, url=url,
                          duration_ms=metrics.duration_ms)
            else:
                self.info("Stream closed by server", stream_id=stream_id, url=url,
                          duration_ms=metrics.duration_ms)
        finally:
            self.log_stream_metrics(metrics, stream_id)

    @contextmanager
    def track_request(self, method: str, url: str, request_id: Optional[str] = None):
        """Context manager timing a regular (non-stream) request."""
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug(f"Starting {method} request", request_id=request_id, url=url)

        try:
            yield request_id
            duration = time.time() - start_time
            self.debug(
                f"Completed {method} request",
                request_id=request_id,
                url=url,
                duration_ms=int(duration * 1000),
            )
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {method} request",
                request_id=request_id,
                url=url,
                duration_ms=int(duration * 1000),
                error=e,
            )
            raise

    def log_stream_metrics(self, metrics: StreamMetrics, stream_id: Optional[str] = None):
        """Log streaming counters for a finished session."""
        self.debug(
            "Streaming metrics",
            stream_id=stream_id,
            outcome=metrics.outcome,
            frames=metrics.frames,
            records=metrics.records,
            bytes=metrics.bytes_received,
            reconnects=metrics.reconnects or None,
            duration_ms=metrics.duration_ms,
            ttff_ms=metrics.time_to_first_frame_ms,
        )
