"""The activation automaton.

An ``ActiveContent`` manages an ordered collection of values of which
exactly one is active, the way a tab strip, carousel or step wizard does.
Hosts render from its state (``contents``, ``active_index``, the per-item
flags) and call its methods in response to user input; the automaton keeps
the active item stable across insertions, removals, swaps and moves.

When the active item is removed, the item before it becomes active. When
the first item is removed the next item becomes active, or the last item
when the collection is circular. Only an empty collection has no active
item, in which case ``active`` is None and ``active_index`` is -1.

Example:
    from active_content import ActiveContent, ActiveContentConfig

    tabs = ActiveContent(ActiveContentConfig(contents=["home", "docs", "faq"]))
    tabs.subscriber = lambda ac: render(ac.contents)
    tabs.activate("docs")
    tabs.remove("docs")  # "home" becomes active
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from active_content.adapters.asyncio_timers import AsyncioTimerScheduler
from active_content.core.autoplay import Autoplay
from active_content.core.config import (
    PROGRAMMATIC,
    ActionOptions,
    ActiveContentConfig,
    AutoplayConfig,
    Direction,
    as_config,
    as_options,
)
from active_content.core.content import Content
from active_content.core.cooldown import CooldownGate
from active_content.core.errors import (
    AutoplayDurationError,
    IndexOutOfBoundsError,
    ItemNotFoundError,
    ReentrantMutationError,
)
from active_content.core.flags import (
    apply_position_flags,
    next_index,
    previous_index,
    repair_contents,
)
from active_content.core.history import History, HistoryAction, HistoryRecord
from active_content.core.logging import get_logger
from active_content.ports.timers import TimerScheduler

logger = get_logger(__name__)

T = TypeVar("T")

ItemPredicate = Callable[[Any, int], bool]
Subscriber = Callable[["ActiveContent[Any]"], None]
Options = ActionOptions | Mapping[str, Any] | None


class ActiveContent(Generic[T]):
    """Ordered collection with a single active item.

    Every mutating method notifies the subscriber exactly once, after the
    whole change has been applied. Batch operations notify once for the
    batch, or not at all when nothing changed.

    The subscriber may read the automaton but must not mutate it from
    inside the callback; such calls raise ``ReentrantMutationError``.

    Attributes:
        contents: The wrapped values, in order.
        active: The active value, or None when empty.
        active_content: The active ``Content``, or None when empty.
        active_index: Index of the active item, -1 when empty.
        is_circular: Whether the last and first items are adjacent.
        direction: Label of the direction of the last activation.
        has_active_changed_at_least_once: Whether any activation happened
            since the last ``initialize``.
    """

    def __init__(
        self,
        config: ActiveContentConfig | Mapping[str, Any] | None = None,
        *,
        scheduler: TimerScheduler | None = None,
        subscriber: Subscriber | None = None,
    ) -> None:
        """Create an automaton and run the initial activation.

        Args:
            config: Initial configuration, defaults to empty contents.
            scheduler: Clock and timers for cooldown and autoplay. Defaults
                to the running asyncio event loop.
            subscriber: Called with the automaton after every change,
                including once at the end of initialization.

        Raises:
            IndexOutOfBoundsError: If the configured active_index is invalid.
            ItemNotFoundError: If the configured active value is not in contents.
            AutoplayDurationError: If the autoplay interval is zero or negative.
            CooldownDurationError: If the cooldown is zero or negative.
        """
        self._scheduler: TimerScheduler = scheduler or AsyncioTimerScheduler()
        self._subscriber = subscriber
        self._should_inform = False
        self._notifying = False
        self._autoplay = Autoplay(self, None, self._scheduler)
        self._history = History()
        self._directions = Direction()

        self.contents: list[Content[T]] = []
        self.active: T | None = None
        self.active_content: Content[T] | None = None
        self.active_index = -1
        self.is_circular = False
        self.direction = self._directions.next
        self.has_active_changed_at_least_once = False

        self.initialize(config if config is not None else ActiveContentConfig())

    @property
    def subscriber(self) -> Subscriber | None:
        return self._subscriber

    @subscriber.setter
    def subscriber(self, subscriber: Subscriber | None) -> None:
        self._subscriber = subscriber

    @property
    def history(self) -> list[HistoryRecord]:
        """Recorded mutations, oldest first."""
        return self._history.records

    @property
    def directions(self) -> Direction:
        return self._directions

    def initialize(self, config: ActiveContentConfig | Mapping[str, Any]) -> None:
        """Reset the automaton from a new configuration.

        Replaces the contents, clears the history, stops autoplay of the
        previous configuration and re-runs the initial activation. The
        subscriber is notified once, at the end.

        The configuration is checked before any state is replaced, so a
        rejected configuration leaves the automaton as it was.

        Raises:
            IndexOutOfBoundsError: If the configured active_index is invalid.
            ItemNotFoundError: If the configured active value is not in contents.
            AutoplayDurationError: If the autoplay interval is zero or negative.
            CooldownDurationError: If the cooldown is zero or negative.
        """
        self._ensure_not_notifying("initialize")
        config = as_config(config)

        initial_index = self._resolve_initial_index(config)
        cooldown = CooldownGate(config.cooldown, self._scheduler.now)

        if config.autoplay is not None and config.autoplay.interval.is_constant:
            interval = config.autoplay.interval.resolve(None, -1)
            if interval <= 0:
                raise AutoplayDurationError(interval)

        # The initial activation must not reach the subscriber
        self._should_inform = False
        try:
            self._autoplay.stop()
            self._autoplay.set_config(None)

            self.is_circular = config.is_circular
            self._directions = config.directions

            self.contents = [
                Content(value=value, index=i) for i, value in enumerate(config.contents)
            ]
            length = len(self.contents)
            for content in self.contents:
                apply_position_flags(content, content.index, length, self.is_circular)

            self._history = History(config.keep_history_for)
            for content in self.contents:
                self._history.push(
                    lambda c=content: HistoryRecord.now(HistoryAction.INSERTED, c.value, c.index)
                )

            self._become_empty()
            self._cooldown = cooldown

            if initial_index is not None:
                self._activate(initial_index, PROGRAMMATIC)

            self.has_active_changed_at_least_once = False
            self.direction = self._directions.next

            self._autoplay.set_config(config.autoplay)
            self._autoplay.play()
        finally:
            self._should_inform = True

        logger.debug(
            "active_content_initialized",
            length=length,
            active_index=self.active_index,
            is_circular=self.is_circular,
        )

        self._inform_subscriber()

    @staticmethod
    def _resolve_initial_index(config: ActiveContentConfig) -> int | None:
        if config.has_active:
            for index, value in enumerate(config.contents):
                if value is config.active:
                    return index
            raise ItemNotFoundError("initialize")

        if config.active_index is not None:
            if config.active_index < 0 or config.active_index >= len(config.contents):
                raise IndexOutOfBoundsError("initialize", "active_index", config.active_index)
            return config.active_index

        return 0 if config.contents else None

    # Activation

    def activate_by_index(self, index: int, options: Options = None) -> None:
        """Activate the item at ``index``.

        Does nothing when the item is already active, or when the
        activation is a user interaction that falls within the cooldown.

        Args:
            index: The index to activate.
            options: Who triggered the activation, and an optional cooldown override.

        Raises:
            IndexOutOfBoundsError: If ``index`` is not in ``[0, len)``.
            CooldownDurationError: If the resolved cooldown is zero or negative.
            AutoplayDurationError: If autoplay re-arms with a zero or negative interval.
        """
        self._ensure_not_notifying("activate_by_index")
        options = as_options(options)
        self._assert_index("activate_by_index", "index", index)

        if index == self.active_index:
            return

        if self._cooldown.is_active(options, self.active, self.active_index):
            logger.debug(
                "activation_suppressed_by_cooldown",
                index=index,
                active_index=self.active_index,
            )
            return

        self._activate(index, options)

    def activate(self, item: T, options: Options = None) -> None:
        """Activate the first item that is ``item`` (identity comparison).

        Raises:
            ItemNotFoundError: If ``item`` is not in the contents.
        """
        self.activate_by_index(self.get_index(item), options)

    def activate_by_predicate(self, predicate: ItemPredicate, options: Options = None) -> None:
        """Activate the first item for which ``predicate(value, index)`` is true.

        Nothing happens when no item matches.
        """
        for index, content in enumerate(self.contents):
            if predicate(content.value, index):
                self.activate_by_index(index, options)
                return

    def next(self, options: Options = None) -> None:
        """Activate the next item.

        On the last item this wraps to the first when circular, and stays
        put otherwise.
        """
        self.activate_by_index(self._clamped_next_index(), options)

    def previous(self, options: Options = None) -> None:
        """Activate the previous item.

        On the first item this wraps to the last when circular, and stays
        put otherwise.
        """
        self.activate_by_index(self._clamped_previous_index(), options)

    def first(self, options: Options = None) -> None:
        if self.is_empty():
            return
        self.activate_by_index(0, options)

    def last(self, options: Options = None) -> None:
        if self.is_empty():
            return
        self.activate_by_index(self.get_last_index(), options)

    # Autoplay

    def is_playing(self) -> bool:
        return self._autoplay.is_playing()

    def play(self) -> None:
        """Start or resume autoplay. Does nothing without an autoplay config.

        Raises:
            AutoplayDurationError: If the resolved interval is zero or negative.
        """
        self._autoplay.play()

    def pause(self) -> None:
        """Pause autoplay, remembering how much of the interval has elapsed.

        For example: with an interval of 1 second, pausing after 0.8 seconds
        and calling ``play`` later advances 0.2 seconds after resuming.
        """
        self._autoplay.pause()

    def stop(self) -> None:
        """Stop autoplay; a later ``play`` starts a full interval."""
        self._autoplay.stop()

    def configure_autoplay(
        self, config: AutoplayConfig | Mapping[str, Any] | None | bool
    ) -> None:
        """Replace the autoplay configuration and start playing.

        Passing None or False disables autoplay.

        Raises:
            AutoplayDurationError: If the resolved interval is zero or negative.
        """
        self._ensure_not_notifying("configure_autoplay")

        if config is None or config is False:
            autoplay_config = None
        elif isinstance(config, AutoplayConfig):
            autoplay_config = config
        else:
            autoplay_config = AutoplayConfig.model_validate(config)

        self._autoplay.set_config(autoplay_config)
        self._autoplay.play()

    # Insertion

    def insert_at_index(self, item: T, index: int, options: Options = None) -> Content[T]:
        """Insert ``item`` at ``index``, keeping the active item active.

        Inserting the very first item also activates it, using ``options``
        for its effect on autoplay.

        Args:
            item: The value to insert.
            index: Position in ``[0, len]``; ``len`` appends.
            options: Options for the activation of a first item.

        Returns:
            The new ``Content``.

        Raises:
            IndexOutOfBoundsError: If ``index`` is not in ``[0, len]``.
        """
        self._ensure_not_notifying("insert_at_index")

        if index < 0 or index > len(self.contents):
            raise IndexOutOfBoundsError("insert_at_index", "index", index)

        content: Content[T] = Content(value=item, index=index)
        self.contents.insert(index, content)

        # The active item shifted one slot to the right
        if index <= self.active_index:
            self.active_index += 1

        repair_contents(self.contents, self.active_index, self.is_circular, alter_active=True)

        self._history.push(lambda: HistoryRecord.now(HistoryAction.INSERTED, item, index))
        logger.debug("content_inserted", index=index, length=len(self.contents))

        if len(self.contents) == 1:
            # _activate notifies
            self._activate(0, as_options(options))
        else:
            self._inform_subscriber()

        return content

    def push(self, item: T, options: Options = None) -> Content[T]:
        return self.insert_at_index(item, len(self.contents), options)

    def unshift(self, item: T, options: Options = None) -> Content[T]:
        return self.insert_at_index(item, 0, options)

    def insert_at_predicate(
        self, item: T, predicate: ItemPredicate, options: Options = None
    ) -> Content[T] | None:
        """Insert ``item`` at the position of the first predicate match.

        Returns:
            The new ``Content``, or None when no item matched.
        """
        return self._insert_at_predicate_with_offset(item, predicate, 0, options)

    def insert_before_predicate(
        self, item: T, predicate: ItemPredicate, options: Options = None
    ) -> Content[T] | None:
        """Insert ``item`` before the first predicate match.

        Returns:
            The new ``Content``, or None when no item matched.
        """
        return self._insert_at_predicate_with_offset(item, predicate, -1, options)

    def insert_after_predicate(
        self, item: T, predicate: ItemPredicate, options: Options = None
    ) -> Content[T] | None:
        """Insert ``item`` after the first predicate match.

        Returns:
            The new ``Content``, or None when no item matched.
        """
        return self._insert_at_predicate_with_offset(item, predicate, 1, options)

    def _insert_at_predicate_with_offset(
        self, item: T, predicate: ItemPredicate, offset: int, options: Options
    ) -> Content[T] | None:
        for index, content in enumerate(self.contents):
            if predicate(content.value, index):
                at = min(max(0, index + offset), len(self.contents))
                return self.insert_at_index(item, at, options)
        return None

    # Removal

    def remove_by_index(self, index: int, options: Options = None) -> T:
        """Remove the item at ``index``.

        When the active item is removed the previous item is activated, or
        the next one when index 0 was removed from a linear collection, or
        the last one when it was removed from a circular collection.
        ``options`` applies to that activation.

        Returns:
            The removed value.

        Raises:
            IndexOutOfBoundsError: If ``index`` is not in ``[0, len)``.
        """
        self._ensure_not_notifying("remove_by_index")
        options = as_options(options)

        value = self._remove_at("remove_by_index", index)

        if self.is_empty():
            self._become_empty()
            self.stop()
        elif index == self.active_index:
            # -1 makes "previous" land on the next item, or wrap when circular
            if index == 0:
                self.active_index = -1

            repair_contents(self.contents, self.active_index, self.is_circular)

            # _activate notifies
            self._activate(self._clamped_previous_index(), options)
            return value
        elif index < self.active_index:
            self.active_index -= 1

        repair_contents(self.contents, self.active_index, self.is_circular)
        self._inform_subscriber()

        return value

    def remove(self, item: T, options: Options = None) -> T:
        """Remove the first item that is ``item`` (identity comparison).

        Raises:
            ItemNotFoundError: If ``item`` is not in the contents.
        """
        return self.remove_by_index(self.get_index(item), options)

    def pop(self, options: Options = None) -> T | None:
        """Remove the last item, returning None when empty."""
        if self.is_empty():
            return None
        return self.remove_by_index(self.get_last_index(), options)

    def shift(self, options: Options = None) -> T | None:
        """Remove the first item, returning None when empty."""
        if self.is_empty():
            return None
        return self.remove_by_index(0, options)

    def remove_by_predicate(self, predicate: ItemPredicate, options: Options = None) -> list[T]:
        """Remove every item for which ``predicate(value, index)`` is true.

        The predicate sees the indexes from before any removal. If the
        active item is among the removed, a new item is activated following
        the same rules as ``remove_by_index``.

        Returns:
            The removed values, in their original order.
        """
        self._ensure_not_notifying("remove_by_predicate")
        options = as_options(options)

        if self.is_empty():
            return []

        matched = [
            content
            for index, content in enumerate(self.contents)
            if predicate(content.value, index)
        ]
        if not matched:
            return []

        # Each removal shifts the items after it one slot to the left.
        # ``content.index`` still holds the original position because
        # the contents are not repaired until all removals are done.
        removed_indexes: list[int] = []
        for already_removed, content in enumerate(matched):
            self._remove_at("remove_by_predicate", content.index - already_removed)
            removed_indexes.append(content.index)

        removed_values = [content.value for content in matched]

        if self.is_empty():
            self._become_empty()
            self.stop()
        else:
            removed_before_active = sum(1 for i in removed_indexes if i < self.active_index)
            removed_active = self.active_index in removed_indexes

            self.active_index = max(0, self.active_index - removed_before_active)

            if removed_active:
                if self.active_index == 0:
                    self.active_index = -1

                repair_contents(self.contents, self.active_index, self.is_circular)

                # _activate notifies
                self._activate(self._clamped_previous_index(), options)
                return removed_values

        repair_contents(self.contents, self.active_index, self.is_circular)
        self._inform_subscriber()

        return removed_values

    def _remove_at(self, method: str, index: int) -> T:
        self._assert_index(method, "index", index)

        value = self.contents.pop(index).value

        self._history.push(lambda: HistoryRecord.now(HistoryAction.REMOVED, value, index))
        logger.debug("content_removed", index=index, length=len(self.contents))

        return value

    # Reordering

    def swap_by_index(self, a: int, b: int) -> None:
        """Swap the items at ``a`` and ``b``.

        The active item stays active, only its position changes.

        Raises:
            IndexOutOfBoundsError: If ``a`` or ``b`` is not in ``[0, len)``.
        """
        self._ensure_not_notifying("swap_by_index")
        self._assert_index("swap_by_index", "a", a)
        self._assert_index("swap_by_index", "b", b)

        if a == b:
            return

        item_a = self.contents[a]
        item_b = self.contents[b]

        if self.active_index == a:
            self.active_index = b
        elif self.active_index == b:
            self.active_index = a

        self.contents[a] = item_b
        self.contents[b] = item_a

        repair_contents(self.contents, self.active_index, self.is_circular)

        self._history.push(
            lambda: HistoryRecord.now(
                HistoryAction.SWAPPED, (item_a.value, item_b.value), (a, b)
            )
        )
        logger.debug("content_swapped", a=a, b=b)

        self._inform_subscriber()

    def swap(self, a: T, b: T) -> None:
        """Swap two items by identity.

        Raises:
            ItemNotFoundError: If either value is not in the contents.
        """
        self.swap_by_index(self.get_index(a), self.get_index(b))

    def move_by_index(self, from_index: int, to_index: int) -> None:
        """Move the item at ``from_index`` so that it ends up at ``to_index``.

        The active item stays active; ``active_index`` follows it.

        Raises:
            IndexOutOfBoundsError: If either index is not in ``[0, len)``.
        """
        self._ensure_not_notifying("move_by_index")
        self._assert_index("move_by_index", "from", from_index)
        self._assert_index("move_by_index", "to", to_index)

        if from_index == to_index:
            return

        active_index = self.active_index

        # Capital letter marks the active item in the examples below.
        if active_index == from_index:
            # [a, b, C, d] 2 -> 0 gives [C, a, b, d]
            self.active_index = to_index
        elif to_index == active_index and from_index > active_index:
            # [a, B, c, d] 3 -> 1 gives [a, d, B, c]
            self.active_index += 1
        elif to_index == active_index and from_index < active_index:
            # [a, b, C, d] 1 -> 2 gives [a, C, b, d]
            self.active_index -= 1
        elif to_index > active_index and from_index < active_index:
            # [a, B, c, d] 0 -> 3 gives [B, c, d, a]
            self.active_index -= 1
        elif to_index < active_index and from_index > active_index:
            # [a, b, C, d] 3 -> 0 gives [d, a, b, C]
            self.active_index += 1

        moved = self.contents.pop(from_index)
        self.contents.insert(to_index, moved)

        repair_contents(self.contents, self.active_index, self.is_circular)

        self._history.push(
            lambda: HistoryRecord.now(HistoryAction.MOVED, moved.value, (from_index, to_index))
        )
        logger.debug("content_moved", from_index=from_index, to_index=to_index)

        self._inform_subscriber()

    def move(self, item: T, to_index: int) -> None:
        """Move an item, found by identity, to ``to_index``.

        Raises:
            ItemNotFoundError: If ``item`` is not in the contents.
            IndexOutOfBoundsError: If ``to_index`` is not in ``[0, len)``.
        """
        self.move_by_index(self.get_index(item), to_index)

    def move_by_index_at_predicate(self, index: int, predicate: ItemPredicate) -> None:
        """Move the item at ``index`` to the position of the first predicate match."""
        self._move_to_predicate_with_offset(index, predicate, 0)

    def move_by_index_before_predicate(self, index: int, predicate: ItemPredicate) -> None:
        """Move the item at ``index`` to just before the first predicate match."""
        self._move_to_predicate_with_offset(index, predicate, -1)

    def move_by_index_after_predicate(self, index: int, predicate: ItemPredicate) -> None:
        """Move the item at ``index`` to just after the first predicate match."""
        self._move_to_predicate_with_offset(index, predicate, 1)

    def move_at_predicate(self, item: T, predicate: ItemPredicate) -> None:
        self._move_to_predicate_with_offset(self.get_index(item), predicate, 0)

    def move_before_predicate(self, item: T, predicate: ItemPredicate) -> None:
        self._move_to_predicate_with_offset(self.get_index(item), predicate, -1)

    def move_after_predicate(self, item: T, predicate: ItemPredicate) -> None:
        self._move_to_predicate_with_offset(self.get_index(item), predicate, 1)

    def _move_to_predicate_with_offset(
        self, from_index: int, predicate: ItemPredicate, offset: int
    ) -> None:
        last_index = self.get_last_index()
        for index, content in enumerate(self.contents):
            if predicate(content.value, index):
                at = min(max(0, index + offset), last_index)
                self.move_by_index(from_index, at)
                return

    # Queries

    def get_index(self, item: T) -> int:
        """Index of the first content whose value is ``item``.

        Raises:
            ItemNotFoundError: If ``item`` is not in the contents.
        """
        for index, content in enumerate(self.contents):
            if content.value is item:
                return index
        raise ItemNotFoundError("get_index")

    def get_last_index(self) -> int:
        return len(self.contents) - 1

    def get_next_index(self, index: int) -> int:
        """Index after ``index``; wraps to 0 when circular, unclamped otherwise."""
        return next_index(index, len(self.contents), self.is_circular)

    def get_previous_index(self, index: int) -> int:
        """Index before ``index``; wraps to the last index when circular, unclamped otherwise."""
        return previous_index(index, len(self.contents), self.is_circular)

    def is_empty(self) -> bool:
        return len(self.contents) == 0

    def __len__(self) -> int:
        return len(self.contents)

    # Helpers

    def _activate(self, index: int, options: ActionOptions) -> None:
        """Make ``index`` active without consulting the cooldown."""
        after_target = self.get_next_index(index)
        before_target = self.get_previous_index(index)

        for i, content in enumerate(self.contents):
            # Capture the old state before it is overwritten
            content.was_active_before_last = content.active

            content.active = i == index
            content.is_next = i == after_target
            content.is_previous = i == before_target

            if content.active:
                self.active = content.value
                self.active_content = content

                # Needs the old active index, so before it is replaced
                self.direction = self._direction_towards(i)

                content.has_been_active_before = True
                self.active_index = i

        self._autoplay.on_active_index_changed(index, options)

        value = self.active
        self._history.push(lambda: HistoryRecord.now(HistoryAction.ACTIVATED, value, index))

        self.has_active_changed_at_least_once = True
        self._cooldown.mark_accepted()

        logger.debug(
            "content_activated",
            index=index,
            direction=self.direction,
            is_user_interaction=options.is_user_interaction,
        )

        self._inform_subscriber()

    def _direction_towards(self, target: int) -> str:
        active_index = self.active_index

        if self.is_circular:
            last_index = self.get_last_index()

            if active_index == 0 and target == last_index:
                return self._directions.previous
            if active_index == last_index and target == 0:
                return self._directions.next

        if target >= active_index:
            return self._directions.next
        return self._directions.previous

    def _clamped_next_index(self) -> int:
        # get_next_index is not clamped for linear collections
        index = self.active_index + 1
        if index >= len(self.contents):
            index = 0 if self.is_circular else self.get_last_index()
        return index

    def _clamped_previous_index(self) -> int:
        index = self.active_index - 1
        if index < 0:
            index = self.get_last_index() if self.is_circular else 0
        return index

    def _assert_index(self, method: str, index_name: str, index: int) -> None:
        if index < 0 or index >= len(self.contents):
            raise IndexOutOfBoundsError(method, index_name, index)

    def _become_empty(self) -> None:
        self.active_index = -1
        self.active = None
        self.active_content = None

        # Emptying the contents counts as a change of the active item
        self.has_active_changed_at_least_once = True

    def _ensure_not_notifying(self, method: str) -> None:
        if self._notifying:
            logger.warning("reentrant_mutation_rejected", method=method)
            raise ReentrantMutationError(method)

    def _inform_subscriber(self) -> None:
        if not self._should_inform or self._subscriber is None:
            return

        self._notifying = True
        try:
            self._subscriber(self)
        finally:
            self._notifying = False
