"""Timer scheduler backed by an asyncio event loop."""

import asyncio
import time
from collections.abc import Callable


class AsyncioTimerScheduler:
    """Schedules autoplay callbacks with ``loop.call_later``.

    When no loop is given, the running loop is looked up each time a timer
    is scheduled. An automaton without autoplay therefore never needs a
    loop, but one with autoplay must be driven from inside a running loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Loop to schedule on. Defaults to the loop running at
                scheduling time.
        """
        self._loop = loop

    def now(self) -> float:
        if self._loop is not None:
            return self._loop.time()
        return time.monotonic()

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        """Schedule ``callback`` on the event loop.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
