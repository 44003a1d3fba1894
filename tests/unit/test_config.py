"""Tests for configuration and per-call option models."""

import pytest
from pydantic import ValidationError

from active_content.core.config import (
    PROGRAMMATIC,
    USER_INTERACTION,
    ActionOptions,
    ActiveContentConfig,
    AutoplayConfig,
    Direction,
    as_config,
    as_options,
)
from active_content.core.duration import Duration


class TestActiveContentConfig:
    def test_defaults(self):
        config = ActiveContentConfig()
        assert config.contents == []
        assert config.active_index is None
        assert not config.is_circular
        assert config.autoplay is None
        assert config.cooldown is None
        assert config.directions == Direction(next="right", previous="left")
        assert config.keep_history_for == 0
        assert not config.has_active

    def test_contents_keep_identity(self):
        value = object()
        config = ActiveContentConfig(contents=[value])
        assert config.contents[0] is value

    def test_explicit_none_active_counts_as_given(self):
        assert ActiveContentConfig(active=None).has_active

    def test_cooldown_number_becomes_duration(self):
        config = ActiveContentConfig(cooldown=5)
        assert config.cooldown == Duration.constant(5)

    def test_cooldown_callable_becomes_computed_duration(self):
        def per_item(value, index):
            return 1.0

        config = ActiveContentConfig(cooldown=per_item)
        assert config.cooldown is not None
        assert not config.cooldown.is_constant

    def test_invalid_cooldown_rejected(self):
        with pytest.raises(ValidationError):
            ActiveContentConfig(cooldown="soon")

    def test_autoplay_from_mapping(self):
        config = ActiveContentConfig(autoplay={"interval": 2, "stops_on_user_interaction": True})
        assert config.autoplay == AutoplayConfig(
            interval=Duration.constant(2), stops_on_user_interaction=True
        )

    def test_autoplay_false_disables(self):
        assert ActiveContentConfig(autoplay=False).autoplay is None

    def test_negative_history_rejected(self):
        with pytest.raises(ValidationError):
            ActiveContentConfig(keep_history_for=-1)

    def test_custom_directions(self):
        config = ActiveContentConfig(directions={"next": "down", "previous": "up"})
        assert config.directions.next == "down"
        assert config.directions.previous == "up"


class TestAutoplayConfig:
    def test_interval_required(self):
        with pytest.raises(ValidationError):
            AutoplayConfig()

    def test_invalid_interval_rejected(self):
        with pytest.raises(ValidationError):
            AutoplayConfig(interval=[1])


class TestAsConfig:
    def test_passes_models_through(self):
        config = ActiveContentConfig(contents=["a"])
        assert as_config(config) is config

    def test_validates_mappings(self):
        config = as_config({"contents": ["a", "b"], "is_circular": True})
        assert config.contents == ["a", "b"]
        assert config.is_circular


class TestAsOptions:
    def test_none_is_user_interaction(self):
        assert as_options(None) is USER_INTERACTION
        assert USER_INTERACTION.is_user_interaction

    def test_programmatic(self):
        assert not PROGRAMMATIC.is_user_interaction

    def test_validates_mappings(self):
        options = as_options({"is_user_interaction": False, "cooldown": 3})
        assert options == ActionOptions(is_user_interaction=False, cooldown=Duration.constant(3))
