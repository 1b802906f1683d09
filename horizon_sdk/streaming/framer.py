"""
Event-stream framer.

Turns the raw bytes of a ``text/event-stream`` body into event payloads.
Only ``data:`` fields matter to Horizon: consecutive ``data:`` lines are
joined with a newline and a blank line dispatches them. Every other line
(``event:``, ``id:``, ``retry:``, comments, keep-alives) is ignored.

The framer holds at most one frame in memory and performs no JSON parsing.
"""

from typing import AsyncIterable, AsyncIterator, List, Optional

DATA_FIELD = b"data:"


class EventFramer:
    """Incremental framer; feed it chunks in arrival order.

    Chunk boundaries may fall anywhere, including inside a line or between
    the ``\\r`` and ``\\n`` of a CRLF terminator.
    """

    def __init__(self) -> None:
        self._buffer = b""
        self._fragments: List[bytes] = []

    @property
    def pending(self) -> bool:
        """True when a frame has started but has not been dispatched."""
        return bool(self._fragments)

    def feed(self, chunk: bytes) -> List[bytes]:
        """Consume a chunk and return the payloads it completed, in order."""
        self._buffer += chunk
        frames: List[bytes] = []

        while True:
            index = self._buffer.find(b"\n")
            if index < 0:
                break
            line = self._buffer[:index]
            self._buffer = self._buffer[index + 1:]
            if line.endswith(b"\r"):
                line = line[:-1]

            frame = self._feed_line(line)
            if frame is not None:
                frames.append(frame)

        return frames

    def flush(self) -> Optional[bytes]:
        """Dispatch whatever complete ``data:`` lines are left at end of stream.

        A trailing line without its terminator is dropped: a frame is only
        built from lines that were fully received.
        """
        self._buffer = b""
        return self._dispatch()

    def _feed_line(self, line: bytes) -> Optional[bytes]:
        if not line:
            return self._dispatch()

        if line.startswith(DATA_FIELD):
            value = line[len(DATA_FIELD):]
            if value.startswith(b" "):
                value = value[1:]
            self._fragments.append(value)

        return None

    def _dispatch(self) -> Optional[bytes]:
        if not self._fragments:
            return None
        payload = b"\n".join(self._fragments)
        self._fragments = []
        # Empty payloads carry nothing to decode
        return payload or None


async def iter_frames(chunks: AsyncIterable[bytes]) -> AsyncIterator[bytes]:
    """Yield event payloads framed from an async byte iterator.

    Read errors raised by ``chunks`` propagate unchanged. When ``chunks`` ends
    cleanly, complete but undispatched ``data:`` lines are yielded once more.
    """
    framer = EventFramer()
    async for chunk in chunks:
        for frame in framer.feed(chunk):
            yield frame

    last = framer.flush()
    if last is not None:
        yield last
