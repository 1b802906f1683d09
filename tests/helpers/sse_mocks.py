"""Helper functions for serving mocked Horizon responses over httpx."""

import asyncio
import json
from typing import Any, AsyncIterator, Callable, Dict, Iterable, List, Optional, Tuple, Union

import httpx

Body = Union[bytes, Iterable[bytes]]


def sse_body(*payloads: Union[str, bytes, Dict[str, Any]]) -> bytes:
    """Frame payloads as ``data:`` events separated by blank lines."""
    frames = []
    for payload in payloads:
        if isinstance(payload, dict):
            payload = json.dumps(payload)
        if isinstance(payload, str):
            payload = payload.encode()
        frames.append(b"data: " + payload + b"\n\n")
    return b"".join(frames)


async def chunked_body(chunks: Iterable[bytes], hold: Optional[asyncio.Event] = None,
                       error: Optional[Exception] = None) -> AsyncIterator[bytes]:
    """Yield ``chunks`` one by one, then block on ``hold`` or raise ``error``."""
    for chunk in chunks:
        yield chunk
        await asyncio.sleep(0)
    if error is not None:
        raise error
    if hold is not None:
        await hold.wait()


class StreamServer:
    """
    Mock transport serving one prepared response per request.

    Each response is ``(status_code, chunks)``; the last one is repeated once
    the list is exhausted. Every request received is kept in ``requests``.
    """

    def __init__(self, *responses: Tuple[int, Body], hold: Optional[asyncio.Event] = None,
                 error: Optional[Exception] = None):
        self.responses = list(responses) or [(200, b"")]
        self.hold = hold
        self.error = error
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        index = min(len(self.requests), len(self.responses) - 1)
        self.requests.append(request)
        status_code, body = self.responses[index]
        chunks = [body] if isinstance(body, bytes) else list(body)
        last = index == len(self.responses) - 1
        return httpx.Response(
            status_code,
            headers={"Content-Type": "text/event-stream"},
            content=chunked_body(
                chunks,
                hold=self.hold if last else None,
                error=self.error if last else None,
            ),
        )

    @property
    def urls(self) -> List[str]:
        return [str(request.url) for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def json_transport(routes: Dict[str, Tuple[int, Any]],
                   seen: Optional[List[httpx.Request]] = None) -> httpx.MockTransport:
    """Transport answering JSON bodies keyed by ``METHOD path`` or by path."""
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path.lstrip("/")
        route = routes.get(f"{request.method} {path}") or routes.get(path)
        if route is None:
            return httpx.Response(404, json={"title": "Resource Missing", "status": 404})
        status_code, body = route
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


class RecordCollector:
    """Handler recording every record it receives; may cancel after N records."""

    def __init__(self, stop_after: Optional[int] = None,
                 on_stop: Optional[Callable[[], None]] = None):
        self.records: List[Any] = []
        self.stop_after = stop_after
        self.on_stop = on_stop

    def __call__(self, record: Any) -> None:
        self.records.append(record)
        if self.stop_after is not None and len(self.records) == self.stop_after:
            if self.on_stop is not None:
                self.on_stop()
