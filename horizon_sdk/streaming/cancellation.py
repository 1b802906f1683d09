"""
Cancellation for streaming calls.

A CancellationToken is the caller's handle for stopping a stream. It is
independent of any single request: one token may stop several concurrent
streams, and it may be armed with a deadline. Cancelling through a token is
a clean stop, never an error.
"""

import asyncio
from typing import Any, Awaitable, Optional, Tuple


class CancellationToken:
    """Cooperative cancellation signal backed by an asyncio.Event."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._timer: Optional[asyncio.TimerHandle] = None
        self.reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "requested") -> None:
        """Request cancellation. Calling it again has no effect."""
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
        self._disarm()

    def cancel_after(self, seconds: float) -> "CancellationToken":
        """Cancel automatically after ``seconds``. Needs a running event loop."""
        loop = asyncio.get_running_loop()
        self._disarm()
        self._timer = loop.call_later(seconds, self.cancel, "deadline")
        return self

    def close(self) -> None:
        """Disarm a pending deadline without cancelling."""
        self._disarm()

    async def wait(self) -> None:
        await self._event.wait()

    async def sleep(self, delay: float) -> bool:
        """Sleep up to ``delay`` seconds.

        Returns:
            False if cancellation was requested before the delay elapsed
        """
        if self.cancelled:
            return False
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return True
        return False

    async def race(self, awaitable: Awaitable[Any]) -> Tuple[bool, Any]:
        """Run ``awaitable`` until it finishes or cancellation is requested.

        Returns:
            ``(True, result)`` when the awaitable finished first, or
            ``(False, None)`` when cancellation won. In the latter case the
            awaitable has been cancelled and any error it raised while being
            torn down is discarded.

        Raises:
            Whatever the awaitable raised, if it finished first.
        """
        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            return False, None

        work = asyncio.ensure_future(awaitable)
        stopper = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({work, stopper}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            # Let the work unwind before the caller releases its resources
            work.cancel()
            await asyncio.wait({work})
            raise
        finally:
            stopper.cancel()

        if work.done():
            return True, work.result()

        work.cancel()
        try:
            await work
        except asyncio.CancelledError:
            pass
        except Exception:  # noqa: BLE001
            # Teardown error caused by our own cancellation
            pass
        return False, None

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
