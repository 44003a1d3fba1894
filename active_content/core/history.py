"""Bounded log of the mutations performed on an automaton."""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class HistoryAction(Enum):
    INSERTED = "INSERTED"
    REMOVED = "REMOVED"
    ACTIVATED = "ACTIVATED"
    SWAPPED = "SWAPPED"
    MOVED = "MOVED"


@dataclass(frozen=True)
class HistoryRecord:
    """One mutation.

    Attributes:
        action: What happened.
        value: The affected value; ``(a, b)`` values for SWAPPED.
        index: The affected index; ``(a, b)`` for SWAPPED, ``(from, to)`` for MOVED.
        time: When it happened, in UTC.
    """

    action: HistoryAction
    value: Any
    index: int | tuple[int, int]
    time: datetime

    @classmethod
    def now(
        cls, action: HistoryAction, value: Any, index: int | tuple[int, int]
    ) -> "HistoryRecord":
        return cls(action=action, value=value, index=index, time=datetime.now(UTC))


class History:
    """Keeps the most recent ``keep_for`` records, oldest first.

    With ``keep_for`` of 0 nothing is recorded and record factories are
    never called.
    """

    def __init__(self, keep_for: int = 0) -> None:
        if keep_for < 0:
            raise ValueError("keep_for cannot be negative")
        self._keep_for = keep_for
        self._records: deque[HistoryRecord] = deque(maxlen=keep_for or None)

    @property
    def keep_for(self) -> int:
        return self._keep_for

    @property
    def records(self) -> list[HistoryRecord]:
        return list(self._records)

    def push(self, record: Callable[[], HistoryRecord]) -> None:
        if self._keep_for > 0:
            self._records.append(record())

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
