"""Positional flag derivation and whole-collection repair.

Positions are stored on every ``Content`` rather than computed on read, so
each structural mutation must end with ``repair_contents``.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from active_content.core.content import Content


@dataclass(frozen=True)
class PositionFlags:
    is_first: bool
    is_last: bool
    has_next: bool
    has_previous: bool


def derive_position_flags(index: int, length: int, is_circular: bool) -> PositionFlags:
    """Compute the boundary flags of the item at ``index`` in a collection of ``length``."""
    if is_circular:
        # Every item has neighbours as long as there is any content at all
        has_next = has_previous = length > 0
    else:
        has_next = index + 1 < length
        has_previous = index - 1 >= 0

    return PositionFlags(
        is_first=index == 0,
        is_last=index == length - 1,
        has_next=has_next,
        has_previous=has_previous,
    )


def next_index(index: int, length: int, is_circular: bool) -> int:
    """Index after ``index``, wrapping to 0 when circular.

    Not clamped: for linear collections the last index yields ``length``.
    """
    following = index + 1
    if is_circular and following == length:
        return 0
    return following


def previous_index(index: int, length: int, is_circular: bool) -> int:
    """Index before ``index``, wrapping to the last index when circular.

    Not clamped: for linear collections index 0 yields -1.
    """
    preceding = index - 1
    if is_circular and preceding < 0:
        return length - 1
    return preceding


def apply_position_flags(content: Content[Any], index: int, length: int, is_circular: bool) -> None:
    flags = derive_position_flags(index, length, is_circular)
    content.is_first = flags.is_first
    content.is_last = flags.is_last
    content.has_next = flags.has_next
    content.has_previous = flags.has_previous


def repair_contents(
    contents: Sequence[Content[Any]],
    active_index: int,
    is_circular: bool,
    *,
    alter_active: bool = False,
) -> None:
    """Renumber every item and recompute its flags relative to ``active_index``.

    ``active`` is only rewritten when ``alter_active`` is set; swaps and
    moves carry the active flag with the item instead.
    """
    length = len(contents)
    after_active = next_index(active_index, length, is_circular)
    before_active = previous_index(active_index, length, is_circular)

    for index, content in enumerate(contents):
        content.index = index

        if alter_active:
            content.active = index == active_index

        content.is_next = index == after_active
        content.is_previous = index == before_active

        apply_position_flags(content, index, length, is_circular)
