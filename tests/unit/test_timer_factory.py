"""Tests for the timer scheduler factory."""

import asyncio

import pytest

from active_content.adapters import (
    AsyncioTimerScheduler,
    ManualTimerScheduler,
    create_timer_scheduler,
)


class TestCreateTimerScheduler:
    def test_asyncio_backend(self):
        assert isinstance(create_timer_scheduler("asyncio"), AsyncioTimerScheduler)

    def test_asyncio_backend_with_loop(self):
        loop = asyncio.new_event_loop()
        try:
            scheduler = create_timer_scheduler("asyncio", loop=loop)
            assert abs(scheduler.now() - loop.time()) < 1.0
        finally:
            loop.close()

    def test_asyncio_backend_rejects_non_loop(self):
        with pytest.raises(ValueError, match="loop"):
            create_timer_scheduler("asyncio", loop=1.0)

    def test_manual_backend(self):
        scheduler = create_timer_scheduler("manual", start=3)
        assert isinstance(scheduler, ManualTimerScheduler)
        assert scheduler.now() == 3.0

    def test_unsupported_backend(self):
        with pytest.raises(ValueError, match="Unsupported timer backend"):
            create_timer_scheduler("threading")


class TestAsyncioTimerScheduler:
    def test_now_without_loop_is_monotonic(self):
        scheduler = AsyncioTimerScheduler()
        first = scheduler.now()
        assert scheduler.now() >= first

    def test_call_later_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioTimerScheduler().call_later(1.0, lambda: None)

    @pytest.mark.asyncio
    async def test_call_later_on_running_loop(self):
        fired = asyncio.Event()
        AsyncioTimerScheduler().call_later(0.01, fired.set)
        await asyncio.wait_for(fired.wait(), timeout=1.0)
        assert fired.is_set()
