"""Unit tests for cooperative cancellation."""

import asyncio

import pytest

from horizon_sdk.streaming.cancellation import CancellationToken

pytestmark = pytest.mark.unit


class TestCancellationToken:
    """Test the cancellation token."""

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self):
        token = CancellationToken()
        assert not token.cancelled
        token.cancel("first")
        token.cancel("second")
        assert token.cancelled
        assert token.reason == "first"

    @pytest.mark.asyncio
    async def test_race_returns_result_when_work_wins(self):
        token = CancellationToken()

        async def work():
            return 42

        assert await token.race(work()) == (True, 42)

    @pytest.mark.asyncio
    async def test_race_propagates_work_errors(self):
        token = CancellationToken()

        async def work():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            await token.race(work())

    @pytest.mark.asyncio
    async def test_race_cancels_blocked_work(self):
        token = CancellationToken()
        started = asyncio.Event()
        torn_down = asyncio.Event()

        async def work():
            started.set()
            try:
                await asyncio.Event().wait()
            finally:
                torn_down.set()

        async def stop():
            await started.wait()
            token.cancel()

        stopper = asyncio.ensure_future(stop())
        assert await token.race(work()) == (False, None)
        assert torn_down.is_set()
        await stopper

    @pytest.mark.asyncio
    async def test_race_after_cancel_does_not_start_work(self):
        token = CancellationToken()
        token.cancel()
        calls = []

        async def work():
            calls.append(1)

        assert await token.race(work()) == (False, None)
        assert calls == []

    @pytest.mark.asyncio
    async def test_cancel_after_deadline(self):
        token = CancellationToken()
        token.cancel_after(0.01)
        await asyncio.wait_for(token.wait(), timeout=1)
        assert token.reason == "deadline"

    @pytest.mark.asyncio
    async def test_close_disarms_deadline(self):
        token = CancellationToken()
        token.cancel_after(0.01)
        token.close()
        await asyncio.sleep(0.05)
        assert not token.cancelled

    @pytest.mark.asyncio
    async def test_sleep(self):
        token = CancellationToken()
        assert await token.sleep(0) is True
        token.cancel()
        assert await token.sleep(10) is False

    @pytest.mark.asyncio
    async def test_one_token_stops_many_waiters(self):
        token = CancellationToken()

        async def blocked():
            return await token.race(asyncio.Event().wait())

        tasks = [asyncio.ensure_future(blocked()) for _ in range(3)]
        await asyncio.sleep(0)
        token.cancel()
        results = await asyncio.gather(*tasks)
        assert results == [(False, None)] * 3
