"""Shared pytest fixtures for active-content tests."""

from collections.abc import Callable
from typing import Any

import pytest

from active_content import ActiveContent
from active_content.adapters import ManualTimerScheduler
from tests.mocks import RecordingSubscriber


@pytest.fixture
def scheduler() -> ManualTimerScheduler:
    """Provide a host-driven clock starting at 0 seconds.

    Returns:
        ManualTimerScheduler: Time only moves when the test advances it.
    """
    return ManualTimerScheduler()


@pytest.fixture
def subscriber() -> RecordingSubscriber:
    """Provide a subscriber that records every notification.

    Returns:
        RecordingSubscriber: An empty recorder.
    """
    return RecordingSubscriber()


@pytest.fixture
def make_active_content(
    scheduler: ManualTimerScheduler, subscriber: RecordingSubscriber
) -> Callable[..., ActiveContent[Any]]:
    """Provide a factory for automatons wired to the manual clock.

    Keyword arguments are passed through as the configuration. The
    recorder is reset after construction, so ``subscriber.call_count``
    only counts notifications caused by the test itself.

    Returns:
        Callable[..., ActiveContent]: The factory.

    Example:
        def test_next(make_active_content, subscriber):
            ac = make_active_content(contents=["a", "b"])
            ac.next()
            assert subscriber.call_count == 1
    """

    def factory(**config: Any) -> ActiveContent[Any]:
        active_content: ActiveContent[Any] = ActiveContent(
            config, scheduler=scheduler, subscriber=subscriber
        )
        subscriber.reset()
        return active_content

    return factory
