"""Mock implementations for testing."""

from tests.mocks.subscribers import RecordingSubscriber, Snapshot

__all__ = ["RecordingSubscriber", "Snapshot"]
