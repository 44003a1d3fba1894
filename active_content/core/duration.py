"""Constant-or-computed durations for cooldowns and autoplay intervals."""

from collections.abc import Callable
from enum import Enum, auto
from typing import Any

DurationCallback = Callable[[Any, int], float]


class DurationKind(Enum):
    CONSTANT = auto()
    COMPUTED = auto()


class Duration:
    """A duration in seconds, either fixed or computed per item.

    Computed durations receive the value and index of the item the
    duration applies to, so each slide of a carousel can stay on screen
    for a different amount of time.
    """

    __slots__ = ("kind", "_seconds", "_callback")

    def __init__(
        self,
        kind: DurationKind,
        seconds: float | None = None,
        callback: DurationCallback | None = None,
    ) -> None:
        self.kind = kind
        self._seconds = seconds
        self._callback = callback

    @classmethod
    def constant(cls, seconds: float) -> "Duration":
        return cls(DurationKind.CONSTANT, seconds=float(seconds))

    @classmethod
    def computed(cls, callback: DurationCallback) -> "Duration":
        return cls(DurationKind.COMPUTED, callback=callback)

    @classmethod
    def of(cls, value: "Duration | float | DurationCallback") -> "Duration":
        """Wrap a raw config value, passing existing durations through.

        Raises:
            TypeError: If the value is neither a number nor a callable.
        """
        if isinstance(value, Duration):
            return value
        if isinstance(value, bool):
            raise TypeError("duration must be a number or a callable, not a bool")
        if isinstance(value, (int, float)):
            return cls.constant(value)
        if callable(value):
            return cls.computed(value)
        raise TypeError(
            f"duration must be a number or a callable, got {type(value).__name__}"
        )

    @property
    def is_constant(self) -> bool:
        return self.kind is DurationKind.CONSTANT

    @property
    def seconds(self) -> float | None:
        """The fixed value, or None for computed durations."""
        return self._seconds

    def resolve(self, value: Any, index: int) -> float:
        """Return the duration that applies to the item at ``index``."""
        if self._callback is not None:
            return float(self._callback(value, index))
        return self._seconds  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (
            self.kind is other.kind
            and self._seconds == other._seconds
            and self._callback is other._callback
        )

    def __hash__(self) -> int:
        return hash((self.kind, self._seconds, id(self._callback)))

    def __repr__(self) -> str:
        if self.is_constant:
            return f"Duration.constant({self._seconds!r})"
        return f"Duration.computed({self._callback!r})"
