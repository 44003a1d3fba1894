"""Ports (interfaces) for the automaton.

This module contains Protocol definitions for the services the automaton
consumes from its host: a monotonic clock and one-shot timers.
"""

from active_content.ports.timers import TimerHandle, TimerScheduler

__all__ = [
    "TimerHandle",
    "TimerScheduler",
]
