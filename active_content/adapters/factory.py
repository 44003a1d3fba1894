"""Factory for timer scheduler implementations.

Supported backends:
- "asyncio": Schedules on an asyncio event loop (the default)
- "manual": Host-driven clock, for tick loops and tests

Example:
    # Schedule on the running event loop
    scheduler = create_timer_scheduler("asyncio")

    # Drive time yourself
    scheduler = create_timer_scheduler("manual", start=0.0)
"""

from __future__ import annotations

import asyncio
from typing import Union

from active_content.adapters.asyncio_timers import AsyncioTimerScheduler
from active_content.adapters.manual_timers import ManualTimerScheduler

SchedulerType = Union[AsyncioTimerScheduler, ManualTimerScheduler]


def create_timer_scheduler(
    backend: str, **kwargs: asyncio.AbstractEventLoop | float
) -> SchedulerType:
    """Create a timer scheduler for the specified backend.

    Args:
        backend: The backend type to use. Supported values:
            - "asyncio": optional ``loop`` kwarg
            - "manual": optional ``start`` kwarg, the initial clock reading
        **kwargs: Backend-specific configuration options.

    Returns:
        A scheduler instance of the appropriate type.

    Raises:
        ValueError: If the backend is not supported or a kwarg is invalid.
    """
    if backend == "asyncio":
        loop = kwargs.get("loop")
        if loop is not None and not isinstance(loop, asyncio.AbstractEventLoop):
            raise ValueError("'loop' must be an asyncio event loop")
        return AsyncioTimerScheduler(loop)

    if backend == "manual":
        start = kwargs.get("start", 0.0)
        if not isinstance(start, (int, float)):
            raise ValueError("'start' must be a number")
        return ManualTimerScheduler(float(start))

    raise ValueError(
        f"Unsupported timer backend: {backend!r}. Supported: 'asyncio', 'manual'"
    )
