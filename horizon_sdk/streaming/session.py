"""
Streaming session.

A StreamSession owns one subscription: it opens the HTTP request, validates
the status, drives the framer over the body and hands each payload to the
caller's callback, strictly in arrival order. The session is generic; it
knows nothing about the resource behind the URL.

Termination:
- the server closes the body -> returns normally
- the cancellation token fires -> returns normally, connection released
- non-2xx status, transport failure or callback error -> raises
"""

import uuid
from typing import AsyncIterator, Optional

import httpx

from ..config.constants import DEFAULT_CONNECT_TIMEOUT, EVENT_STREAM_MEDIA_TYPE
from ..errors import BadStatusError, StreamTransportError
from ..observability.logging import StreamLogger
from ..observability.metrics import StreamMetrics
from .cancellation import CancellationToken
from .framer import iter_frames
from .types import PayloadCallback, invoke_callback

STREAM_HEADERS = {
    "Accept": EVENT_STREAM_MEDIA_TYPE,
    "Cache-Control": "no-cache",
}

# Streams are unbounded: only connecting is subject to a timeout
STREAM_TIMEOUT = httpx.Timeout(DEFAULT_CONNECT_TIMEOUT, read=None)


class StreamSession:
    """One streaming call against a fully built URL."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str,
        on_payload: PayloadCallback,
        cancellation: Optional[CancellationToken] = None,
        logger: Optional[StreamLogger] = None,
        reconnects: int = 0,
        stream_id: Optional[str] = None,
    ):
        """
        Args:
            http: Shared HTTP client; its connection pool may serve other sessions
            url: Absolute stream URL, cursor included
            on_payload: Called once per framed payload; may be a coroutine function
            cancellation: Token that stops the session cleanly
            logger: Structured logger (defaults to the generic "stream" logger)
            reconnects: Number of reconnects that preceded this session
            stream_id: Identifier used in every log line (generated if not provided)
        """
        self.http = http
        self.url = url
        self.on_payload = on_payload
        self.cancellation = cancellation or CancellationToken()
        self.logger = logger or StreamLogger()
        self.reconnects = reconnects
        self.stream_id = stream_id or str(uuid.uuid4())[:8]
        self.metrics: Optional[StreamMetrics] = None

    async def run(self) -> None:
        """Stream until the server closes, cancellation, or a fatal error.

        Raises:
            BadStatusError: The server answered with a non-2xx status
            StreamTransportError: Connecting or reading failed
            Exception: Whatever ``on_payload`` raised (e.g. DecodeError)
        """
        token = self.cancellation

        with self.logger.track_stream(self.url, stream_id=self.stream_id) as metrics:
            self.metrics = metrics
            metrics.reconnects = self.reconnects
            if token.cancelled:
                metrics.finish("cancelled")
                return

            request = self.http.build_request(
                "GET", self.url, headers=STREAM_HEADERS, timeout=STREAM_TIMEOUT
            )
            try:
                opened, response = await token.race(self.http.send(request, stream=True))
            except httpx.HTTPError as e:
                if token.cancelled:
                    metrics.finish("cancelled")
                    return
                raise StreamTransportError(
                    f"Error connecting to stream: {e}", url=self.url, original_error=e
                ) from e

            if not opened:
                metrics.finish("cancelled")
                return

            try:
                metrics.status_code = response.status_code
                if not response.is_success:
                    raise BadStatusError(response.status_code, url=self.url)

                frames = iter_frames(response.aiter_bytes())
                try:
                    await self._pump(frames, token, metrics)
                finally:
                    await frames.aclose()
            finally:
                await response.aclose()

    async def _pump(
        self,
        frames: AsyncIterator[bytes],
        token: CancellationToken,
        metrics: StreamMetrics,
    ) -> None:
        while True:
            if token.cancelled:
                metrics.finish("cancelled")
                return

            try:
                received, frame = await token.race(frames.__anext__())
            except StopAsyncIteration:
                return
            except httpx.HTTPError as e:
                # A read failure after cancellation is our own teardown
                if token.cancelled:
                    metrics.finish("cancelled")
                    return
                raise StreamTransportError(
                    f"Error reading stream: {e}", url=self.url, original_error=e
                ) from e

            if not received:
                metrics.finish("cancelled")
                return

            metrics.record_frame(len(frame))
            self.logger.debug(
                "Frame received",
                stream_id=self.stream_id,
                size=len(frame),
                index=metrics.frames,
            )

            await invoke_callback(self.on_payload, frame)
            metrics.records += 1


async def run_stream(
    http: httpx.AsyncClient,
    url: str,
    on_payload: PayloadCallback,
    cancellation: Optional[CancellationToken] = None,
    logger: Optional[StreamLogger] = None,
) -> StreamMetrics:
    """Run a single StreamSession and return its metrics."""
    session = StreamSession(http, url, on_payload, cancellation=cancellation, logger=logger)
    await session.run()
    return session.metrics
