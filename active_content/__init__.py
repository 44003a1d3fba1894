"""Activation automaton for tabs, carousels, steppers and similar widgets."""

from active_content.core import (
    PROGRAMMATIC,
    USER_INTERACTION,
    ActionOptions,
    ActiveContent,
    ActiveContentConfig,
    ActiveContentError,
    AutoplayConfig,
    Content,
    Direction,
    Duration,
    HistoryAction,
    HistoryRecord,
)

__all__ = [
    "PROGRAMMATIC",
    "USER_INTERACTION",
    "ActionOptions",
    "ActiveContent",
    "ActiveContentConfig",
    "ActiveContentError",
    "AutoplayConfig",
    "Content",
    "Direction",
    "Duration",
    "HistoryAction",
    "HistoryRecord",
]
