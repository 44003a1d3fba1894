"""Timer protocols the automaton schedules autoplay through.

The automaton never owns an event loop. It asks the host for a monotonic
clock reading and for one-shot delayed callbacks, and cancels a pending
callback before scheduling the next one. Implementations live in
``active_content.adapters``.
"""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A pending one-shot callback.

    ``asyncio.TimerHandle`` satisfies this protocol as-is.
    """

    def cancel(self) -> None:
        """Cancel the callback. Cancelling twice, or after it ran, is a no-op."""
        ...


class TimerScheduler(Protocol):
    """Protocol for host timer services.

    Implementations must run callbacks on the same thread that mutates the
    automaton; the automaton performs no locking of its own.
    """

    def now(self) -> float:
        """Read the monotonic clock.

        Returns:
            The current time in seconds. Only differences between readings
            are meaningful.
        """
        ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule ``callback`` to run once after ``delay`` seconds.

        Args:
            delay: Seconds to wait, greater than or equal to zero.
            callback: Called without arguments.

        Returns:
            A handle that cancels the callback.
        """
        ...
