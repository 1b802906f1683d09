"""Unit tests for structured stream logging and counters."""

import logging

import pytest

from horizon_sdk.observability import StreamLogger, StreamMetrics

pytestmark = pytest.mark.unit


class TestStreamLogger:
    """Test the structured logger."""

    def test_message_format(self, caplog):
        logger = StreamLogger("effects")
        with caplog.at_level(logging.INFO, logger="horizon_sdk.streaming.effects"):
            logger.info("Opened", stream_id="abc", url="https://localhost/effects", skipped=None)

        assert caplog.messages == ["[resource=effects stream_id=abc url=https://localhost/effects] Opened"]

    def test_track_stream_completed(self, caplog):
        logger = StreamLogger("ledgers")
        with caplog.at_level(logging.DEBUG, logger="horizon_sdk.streaming.ledgers"):
            with logger.track_stream("https://localhost/ledgers", stream_id="s1") as metrics:
                metrics.record_frame(10)
                metrics.record_frame(5)

        assert metrics.outcome == "completed"
        assert metrics.frames == 2
        assert metrics.bytes_received == 15
        assert any("Stream closed by server" in message for message in caplog.messages)
        assert any("Streaming metrics" in message and "frames=2" in message
                   for message in caplog.messages)

    def test_track_stream_cancelled(self, caplog):
        logger = StreamLogger("effects")
        with caplog.at_level(logging.INFO, logger="horizon_sdk.streaming.effects"):
            with logger.track_stream("https://localhost/effects") as metrics:
                metrics.finish("cancelled")

        assert any("Stream cancelled" in message for message in caplog.messages)

    def test_track_stream_failed(self, caplog):
        logger = StreamLogger("effects")
        with caplog.at_level(logging.ERROR, logger="horizon_sdk.streaming.effects"):
            with pytest.raises(ValueError):
                with logger.track_stream("https://localhost/effects") as metrics:
                    raise ValueError("bad payload")

        assert metrics.outcome == "failed"
        assert metrics.error_class == "ValueError"
        assert "error_type=ValueError" in caplog.messages[0]

    def test_track_request_failure_is_logged(self, caplog):
        logger = StreamLogger("accounts")
        with caplog.at_level(logging.ERROR, logger="horizon_sdk.streaming.accounts"):
            with pytest.raises(RuntimeError):
                with logger.track_request("GET", "https://localhost/accounts/G", request_id="r1"):
                    raise RuntimeError("down")

        assert "Failed GET request" in caplog.messages[0]
        assert "request_id=r1" in caplog.messages[0]


class TestStreamMetrics:
    """Test per-session counters."""

    def test_to_dict(self):
        metrics = StreamMetrics(url="https://localhost/effects", resource="effects")
        metrics.record_frame(3)
        metrics.finish("completed")
        data = metrics.to_dict()

        assert data["frames"] == 1
        assert data["bytes_received"] == 3
        assert data["outcome"] == "completed"
        assert data["time_to_first_frame_ms"] is not None
        assert data["duration_ms"] >= 0
