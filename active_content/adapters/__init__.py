"""Adapters for host timer services.

This module contains implementations of the TimerScheduler protocol.
"""

from active_content.adapters.asyncio_timers import AsyncioTimerScheduler
from active_content.adapters.factory import create_timer_scheduler
from active_content.adapters.manual_timers import ManualTimerHandle, ManualTimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
    "ManualTimerHandle",
    "ManualTimerScheduler",
    "create_timer_scheduler",
]
