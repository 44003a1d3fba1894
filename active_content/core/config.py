"""Pydantic models for automaton configuration and per-call options.

These models validate the configuration snapshot an ``ActiveContent`` is
built from, and the ``ActionOptions`` passed to every mutation. Durations
may be given as a number of seconds or as a ``(value, index) -> seconds``
callable; both are normalised to a ``Duration``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from active_content.core.duration import Duration


def _to_duration(value: Any) -> Duration | None:
    if value is None:
        return None
    try:
        return Duration.of(value)
    except TypeError as ex:
        # pydantic only turns ValueError/AssertionError into ValidationError
        raise ValueError(str(ex)) from ex


class Direction(BaseModel):
    """Labels assigned to ``ActiveContent.direction`` after each activation."""

    next: str = "right"
    previous: str = "left"

    model_config = ConfigDict(frozen=True)


class AutoplayConfig(BaseModel):
    """Configuration of the self-advancing autoplay timer."""

    interval: Duration = Field(
        ..., description="Seconds each item stays active, or a callable per item"
    )
    stops_on_user_interaction: bool = False

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("interval", mode="before")
    @classmethod
    def _coerce_interval(cls, value: Any) -> Duration | None:
        return _to_duration(value)


class ActionOptions(BaseModel):
    """Per-call options describing who triggered a mutation.

    Only user interactions are subject to the cooldown, and only user
    interactions stop an autoplay configured with
    ``stops_on_user_interaction``.
    """

    is_user_interaction: bool = True
    cooldown: Duration | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("cooldown", mode="before")
    @classmethod
    def _coerce_cooldown(cls, value: Any) -> Duration | None:
        return _to_duration(value)


class ActiveContentConfig(BaseModel):
    """Snapshot an ``ActiveContent`` is (re)initialized from."""

    contents: list[Any] = Field(default_factory=list)
    active: Any = Field(
        None, description="Value to activate initially, compared by identity"
    )
    active_index: int | None = None
    is_circular: bool = False
    autoplay: AutoplayConfig | None = None
    cooldown: Duration | None = None
    directions: Direction = Field(default_factory=Direction)
    keep_history_for: int = Field(0, ge=0)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("cooldown", mode="before")
    @classmethod
    def _coerce_cooldown(cls, value: Any) -> Duration | None:
        return _to_duration(value)

    @field_validator("autoplay", mode="before")
    @classmethod
    def _disable_autoplay(cls, value: Any) -> Any:
        # autoplay=False reads better than autoplay=None in host code
        return None if value is False else value

    @property
    def has_active(self) -> bool:
        """Whether ``active`` was given explicitly, ``None`` included."""
        return "active" in self.model_fields_set


USER_INTERACTION = ActionOptions()
PROGRAMMATIC = ActionOptions(is_user_interaction=False)


def as_config(config: ActiveContentConfig | Mapping[str, Any]) -> ActiveContentConfig:
    """Validate a mapping into an ``ActiveContentConfig``."""
    if isinstance(config, ActiveContentConfig):
        return config
    return ActiveContentConfig.model_validate(config)


def as_options(options: ActionOptions | Mapping[str, Any] | None) -> ActionOptions:
    """Validate per-call options, defaulting to a user interaction."""
    if options is None:
        return USER_INTERACTION
    if isinstance(options, ActionOptions):
        return options
    return ActionOptions.model_validate(options)
