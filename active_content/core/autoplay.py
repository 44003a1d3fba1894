"""Autoplay: a single-slot timer that advances the automaton.

Every (re)arm cancels the pending timer before scheduling a new one, so any
activation, manual or automatic, restarts the countdown with a full
interval for the newly active item.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from active_content.core.config import PROGRAMMATIC, ActionOptions, AutoplayConfig
from active_content.core.errors import AutoplayDurationError
from active_content.core.logging import get_logger
from active_content.ports.timers import TimerHandle, TimerScheduler

if TYPE_CHECKING:
    from active_content.core.active_content import ActiveContent

logger = get_logger(__name__)


class Autoplay:
    """Owns the autoplay timer of one ``ActiveContent``.

    Pausing remembers how much of the current interval has elapsed, so a
    later ``play`` waits only for the remainder. Stopping forgets it.
    """

    def __init__(
        self,
        owner: ActiveContent[Any],
        config: AutoplayConfig | None,
        scheduler: TimerScheduler,
    ) -> None:
        self._owner = owner
        self._config = config
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None
        self._started_at = 0.0
        self._current_interval = 0.0
        self._paused_at: float | None = None

    @property
    def config(self) -> AutoplayConfig | None:
        return self._config

    def set_config(self, config: AutoplayConfig | None) -> None:
        self._config = config
        self._paused_at = None

    def is_playing(self) -> bool:
        return self._handle is not None

    def is_paused(self) -> bool:
        return self._paused_at is not None

    def play(self) -> None:
        """Arm the timer for the active item.

        Raises:
            AutoplayDurationError: If the resolved interval is zero or negative.
        """
        self._cancel_timer()

        owner = self._owner
        config = self._config
        if config is None or owner.is_empty():
            return

        if self._paused_at is not None:
            elapsed = self._paused_at - self._started_at
            interval = max(0.0, self._current_interval - elapsed)
            self._paused_at = None
        else:
            interval = self._resolve_interval(config)
            self._current_interval = interval

        self._started_at = self._scheduler.now()
        self._handle = self._scheduler.call_later(interval, self._on_timer)

        logger.debug(
            "autoplay_scheduled",
            index=owner.active_index,
            interval_seconds=interval,
        )

    def pause(self) -> None:
        # A second pause would move the pause point and shrink the remainder
        if self._paused_at is not None or self._handle is None:
            return

        self._paused_at = self._scheduler.now()
        self._cancel_timer()

    def stop(self) -> None:
        self._cancel_timer()
        self._paused_at = None

    def on_active_index_changed(self, index: int, options: ActionOptions) -> None:
        """Stop, re-arm or hold the timer after an activation."""
        config = self._config
        if config is None:
            return

        if options.is_user_interaction and config.stops_on_user_interaction:
            self.stop()
        elif not self._owner.is_circular and index == self._owner.get_last_index():
            # Linear collections stop at the end
            self.stop()
        elif self._paused_at is not None:
            # Stay paused, but resume the new item with a full interval
            self._current_interval = self._resolve_interval(config)
            self._started_at = self._paused_at
        else:
            self.play()

    def _on_timer(self) -> None:
        self._handle = None

        # The contents may have been emptied while the timer was pending
        if self._owner.is_empty():
            return

        self._owner.next(PROGRAMMATIC)

    def _resolve_interval(self, config: AutoplayConfig) -> float:
        interval = config.interval.resolve(
            self._owner.active, self._owner.active_index
        )
        if interval <= 0:
            raise AutoplayDurationError(interval)
        return interval

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
