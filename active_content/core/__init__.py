"""Core automaton logic.

This module contains the platform-agnostic activation automaton together
with its configuration models, derived-flag helpers and errors.
"""

from active_content.core.active_content import ActiveContent, ItemPredicate, Subscriber
from active_content.core.autoplay import Autoplay
from active_content.core.config import (
    PROGRAMMATIC,
    USER_INTERACTION,
    ActionOptions,
    ActiveContentConfig,
    AutoplayConfig,
    Direction,
)
from active_content.core.content import Content
from active_content.core.cooldown import CooldownGate
from active_content.core.duration import Duration, DurationKind
from active_content.core.errors import (
    ActiveContentError,
    AutoplayDurationError,
    CooldownDurationError,
    ErrorCategory,
    IndexOutOfBoundsError,
    ItemNotFoundError,
    ReentrantMutationError,
)
from active_content.core.flags import (
    PositionFlags,
    derive_position_flags,
    next_index,
    previous_index,
    repair_contents,
)
from active_content.core.history import History, HistoryAction, HistoryRecord
from active_content.core.logging import configure_logging, get_logger

__all__ = [
    # Automaton
    "ActiveContent",
    "Autoplay",
    "Content",
    "CooldownGate",
    "ItemPredicate",
    "Subscriber",
    # Configuration
    "PROGRAMMATIC",
    "USER_INTERACTION",
    "ActionOptions",
    "ActiveContentConfig",
    "AutoplayConfig",
    "Direction",
    "Duration",
    "DurationKind",
    # Errors
    "ActiveContentError",
    "AutoplayDurationError",
    "CooldownDurationError",
    "ErrorCategory",
    "IndexOutOfBoundsError",
    "ItemNotFoundError",
    "ReentrantMutationError",
    # Flags
    "PositionFlags",
    "derive_position_flags",
    "next_index",
    "previous_index",
    "repair_contents",
    # History
    "History",
    "HistoryAction",
    "HistoryRecord",
    # Logging
    "configure_logging",
    "get_logger",
]
