"""Errors raised by the activation automaton.

Every error is raised synchronously at the call site and is never retried
or swallowed internally. Hosts are expected to catch them at the boundary
where user input is turned into calls on the automaton.

Operations that simply find nothing to do (a predicate that matches no
item, an activation suppressed by the cooldown) are not errors; they are
silent no-ops.

Example:
    from active_content.core.errors import IndexOutOfBoundsError

    try:
        tabs.activate_by_index(requested)
    except IndexOutOfBoundsError as ex:
        logger.warning("bad_tab_index", index=ex.index)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of automaton errors for handling decisions."""

    INVALID_INDEX = auto()  # Index outside the valid range
    NOT_FOUND = auto()  # Identity lookup without a match
    CONFIGURATION = auto()  # Resolved duration is zero or negative
    USAGE = auto()  # API misuse, such as mutating from a subscriber


class ActiveContentError(Exception):
    """Base class for every error raised by the automaton.

    Attributes:
        category: The kind of failure, see ErrorCategory.
    """

    category: ErrorCategory = ErrorCategory.USAGE


class IndexOutOfBoundsError(ActiveContentError):
    """An index based operation received an index outside its valid range.

    Attributes:
        method: Name of the operation that rejected the index.
        index_name: Name of the offending argument ("index", "from", "a", ...).
        index: The rejected value.
    """

    category = ErrorCategory.INVALID_INDEX

    def __init__(self, method: str, index_name: str, index: int) -> None:
        super().__init__(f"{method} > {index_name!r} is out of bounds: {index}")
        self.method = method
        self.index_name = index_name
        self.index = index


class ItemNotFoundError(ActiveContentError):
    """An identity based lookup found no matching value in the contents.

    Attributes:
        method: Name of the operation that performed the lookup.
    """

    category = ErrorCategory.NOT_FOUND

    def __init__(self, method: str = "get_index") -> None:
        super().__init__(f"{method} > item is not in the contents")
        self.method = method


class AutoplayDurationError(ActiveContentError):
    """The resolved autoplay interval was zero or negative."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, interval: float) -> None:
        super().__init__(
            f"autoplay > interval cannot be negative or zero, got {interval}"
        )
        self.interval = interval


class CooldownDurationError(ActiveContentError):
    """The resolved cooldown duration was zero or negative."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, duration: float) -> None:
        super().__init__(
            f"cooldown > duration cannot be negative or zero, got {duration}"
        )
        self.duration = duration


class ReentrantMutationError(ActiveContentError):
    """A mutation was started from inside the subscriber callback.

    The subscriber may read the automaton while it is being notified, but
    must defer any further mutation until the notification returns.

    Attributes:
        method: Name of the rejected operation.
    """

    category = ErrorCategory.USAGE

    def __init__(self, method: str) -> None:
        super().__init__(
            f"{method} > cannot mutate while the subscriber is being notified"
        )
        self.method = method
