"""Cooldown gate restraining rapid user-triggered activations."""

from collections.abc import Callable
from typing import Any

from active_content.core.config import ActionOptions
from active_content.core.duration import Duration
from active_content.core.errors import CooldownDurationError


class CooldownGate:
    """Decides whether a user activation falls inside the cooldown window.

    The gate remembers when the last activation was accepted. A later user
    activation is suppressed while ``now <= last_accepted + duration``,
    where the duration comes from the per-call options, else the configured
    default. Each call resolves its own duration; nothing is carried over
    from earlier calls except the timestamp.
    """

    def __init__(self, cooldown: Duration | None, clock: Callable[[], float]) -> None:
        """Initialize the gate.

        Args:
            cooldown: Default cooldown, or None for no default.
            clock: Monotonic clock in seconds.

        Raises:
            CooldownDurationError: If a constant cooldown is zero or negative.
        """
        if cooldown is not None and cooldown.is_constant:
            self._assert_duration(cooldown.resolve(None, -1))

        self._cooldown = cooldown
        self._clock = clock
        self._last_accepted = clock()

    @property
    def last_accepted(self) -> float:
        return self._last_accepted

    def is_active(self, options: ActionOptions, value: Any, index: int) -> bool:
        """Whether an activation with ``options`` must be suppressed.

        Args:
            options: Options of the attempted activation.
            value: The currently active value, passed to computed durations.
            index: The currently active index, passed to computed durations.

        Raises:
            CooldownDurationError: If the resolved duration is zero or negative.
        """
        # Only user interactions are ever restrained
        if not options.is_user_interaction:
            return False

        cooldown = options.cooldown if options.cooldown is not None else self._cooldown
        if cooldown is None:
            return False

        duration = cooldown.resolve(value, index)
        self._assert_duration(duration)

        return self._clock() <= self._last_accepted + duration

    def mark_accepted(self) -> None:
        self._last_accepted = self._clock()

    @staticmethod
    def _assert_duration(duration: float) -> None:
        if duration <= 0:
            raise CooldownDurationError(duration)
