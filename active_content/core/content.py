"""Item wrapper held in ``ActiveContent.contents``."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Content(Generic[T]):
    """Wraps one value of the managed collection.

    Contents compare by identity, so two wrappers around equal values are
    still distinct items. Apart from ``value`` every field is maintained by
    the owning ``ActiveContent`` and is recomputed after each mutation; host
    code should treat them as read-only.

    Attributes:
        value: The wrapped value.
        index: Current position within the contents.
        active: Whether this is the active item.
        has_been_active_before: Set once the item is activated, until reinitialization.
        was_active_before_last: Whether this item was active before the last activation.
        is_first: Whether this item is at index 0.
        is_last: Whether this item is at the last index.
        has_next: Whether an item follows this one (always, when circular).
        has_previous: Whether an item precedes this one (always, when circular).
        is_next: Whether this item comes directly after the active item.
        is_previous: Whether this item comes directly before the active item.
    """

    value: T
    index: int
    active: bool = False
    has_been_active_before: bool = False
    was_active_before_last: bool = False
    is_first: bool = False
    is_last: bool = False
    has_next: bool = False
    has_previous: bool = False
    is_next: bool = False
    is_previous: bool = False
