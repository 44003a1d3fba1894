"""Timer scheduler driven explicitly by the host.

Suitable for hosts with their own frame or tick loop, and for tests that
need deterministic control over time. Time only moves when ``advance`` or
``set_time`` is called.
"""

import itertools
from collections.abc import Callable


class ManualTimerHandle:
    """Handle to a callback pending in a ``ManualTimerScheduler``."""

    def __init__(
        self,
        scheduler: "ManualTimerScheduler",
        when: float,
        sequence: int,
        callback: Callable[[], None],
    ) -> None:
        self.when = when
        self.sequence = sequence
        self.callback = callback
        self.cancelled = False
        self._scheduler = scheduler

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        self._scheduler._discard(self)


class ManualTimerScheduler:
    """In-memory clock and timer queue.

    Callbacks run synchronously from ``advance``, in due-time order, with
    ties broken by scheduling order. A callback that schedules another
    timer falling within the same advance window sees it run in that same
    call.

    Attributes:
        fired: Number of callbacks run so far.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._pending: list[ManualTimerHandle] = []
        self._sequence = itertools.count()
        self.fired = 0

    def now(self) -> float:
        return self._now

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> ManualTimerHandle:
        if delay < 0:
            raise ValueError("delay cannot be negative")
        handle = ManualTimerHandle(
            self, self._now + delay, next(self._sequence), callback
        )
        self._pending.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualTimerHandle]:
        """Pending handles, soonest first."""
        return sorted(self._pending, key=lambda h: (h.when, h.sequence))

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that falls due."""
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        self._run_until(self._now + seconds)

    def set_time(self, now: float) -> None:
        """Jump the clock to ``now``, running every callback that falls due."""
        if now < self._now:
            raise ValueError("cannot move the clock backwards")
        self._run_until(now)

    def _run_until(self, target: float) -> None:
        while True:
            due = [h for h in self._pending if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: (h.when, h.sequence))
            self._pending.remove(handle)
            self._now = handle.when
            self.fired += 1
            handle.callback()
        self._now = target

    def _discard(self, handle: ManualTimerHandle) -> None:
        if handle in self._pending:
            self._pending.remove(handle)
