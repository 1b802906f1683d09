"""
Reconnection for streams closed by the server.

Horizon (or a proxy in front of it) may close an idle stream. By default a
clean close simply ends the streaming call. With a ReconnectConfig the call
instead reopens the stream, resuming after the paging token of the last
record handed to the caller. Status, transport and decode errors are never
retried here.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from ..config.constants import CURSOR_NOW
from ..observability.logging import StreamLogger
from ..streaming.cancellation import CancellationToken
from ..streaming.session import StreamSession
from ..streaming.types import PayloadCallback


@dataclass
class ReconnectConfig:
    """Configuration for reopening streams after a clean close."""
    max_reconnects: int = 3
    initial_backoff: float = 0.5
    backoff_multiplier: float = 1.5
    max_backoff: float = 30.0
    jitter: float = 0.1


class CursorTracker:
    """Remembers the paging token of the last delivered record."""

    def __init__(self, initial: Optional[str] = None):
        self.cursor = initial

    def observe(self, record: Any) -> None:
        token = getattr(record, "paging_token", None)
        if token:
            self.cursor = token


def with_cursor(url: str, cursor: Optional[str]) -> str:
    """Return ``url`` with its cursor replaced (or set to ``now`` when unknown)."""
    return str(httpx.URL(url).copy_set_param("cursor", cursor or CURSOR_NOW))


class ReconnectingStream:
    """
    Runs StreamSessions back to back while the server keeps closing cleanly.

    Works like the single-session call when ``config`` is None.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str,
        on_payload: PayloadCallback,
        tracker: CursorTracker,
        cancellation: Optional[CancellationToken] = None,
        config: Optional[ReconnectConfig] = None,
        stream_logger: Optional[StreamLogger] = None,
        session_factory: Callable[..., StreamSession] = StreamSession,
    ):
        self.http = http
        self.url = url
        self.on_payload = on_payload
        self.tracker = tracker
        self.cancellation = cancellation or CancellationToken()
        self.config = config
        self.stream_logger = stream_logger or StreamLogger()
        self.session_factory = session_factory
        self.reconnects = 0

    async def run(self) -> None:
        token = self.cancellation
        url = self.url
        backoff = self.config.initial_backoff if self.config else 0.0

        while True:
            session = self.session_factory(
                self.http, url, self.on_payload,
                cancellation=token, logger=self.stream_logger,
                reconnects=self.reconnects,
            )
            await session.run()

            if token.cancelled or not self._should_reconnect():
                return

            delay = self._calculate_delay(backoff)
            self.stream_logger.warning(
                f"Stream closed by server, reconnecting in {delay:.2f}s",
                url=url,
                attempt=self.reconnects + 1,
                cursor=self.tracker.cursor,
            )
            if not await token.sleep(delay):
                return

            self.reconnects += 1
            backoff = min(backoff * self.config.backoff_multiplier, self.config.max_backoff)
            if self.tracker.cursor:
                url = with_cursor(url, self.tracker.cursor)

    def _should_reconnect(self) -> bool:
        if self.config is None:
            return False
        return self.reconnects < self.config.max_reconnects

    def _calculate_delay(self, base_delay: float) -> float:
        jitter = random.uniform(0, self.config.jitter * base_delay)
        return min(base_delay + jitter, self.config.max_backoff)
