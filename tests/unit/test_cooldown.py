"""Tests for the cooldown gate."""

import pytest

from active_content.core.config import PROGRAMMATIC, USER_INTERACTION, ActionOptions
from active_content.core.cooldown import CooldownGate
from active_content.core.duration import Duration
from active_content.core.errors import CooldownDurationError


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestCooldownGate:
    def test_records_construction_time(self):
        clock = FakeClock()
        clock.now = 10.0
        gate = CooldownGate(None, clock)
        assert gate.last_accepted == 10.0

    def test_no_cooldown_never_restrains(self):
        gate = CooldownGate(None, FakeClock())
        assert not gate.is_active(USER_INTERACTION, "a", 0)

    def test_restrains_until_window_passes(self):
        clock = FakeClock()
        gate = CooldownGate(Duration.constant(5), clock)

        assert gate.is_active(USER_INTERACTION, "a", 0)
        clock.now = 5.0
        assert gate.is_active(USER_INTERACTION, "a", 0)  # Boundary is inclusive
        clock.now = 5.001
        assert not gate.is_active(USER_INTERACTION, "a", 0)

    def test_programmatic_calls_bypass(self):
        gate = CooldownGate(Duration.constant(5), FakeClock())
        assert not gate.is_active(PROGRAMMATIC, "a", 0)

    def test_mark_accepted_restarts_window(self):
        clock = FakeClock()
        gate = CooldownGate(Duration.constant(1), clock)
        clock.now = 3.0
        gate.mark_accepted()
        clock.now = 3.5
        assert gate.is_active(USER_INTERACTION, "a", 0)

    def test_per_call_cooldown_overrides_default(self):
        clock = FakeClock()
        gate = CooldownGate(Duration.constant(10), clock)
        clock.now = 2.0
        options = ActionOptions(cooldown=Duration.constant(1))
        assert not gate.is_active(options, "a", 0)

    def test_per_call_cooldown_without_default(self):
        gate = CooldownGate(None, FakeClock())
        options = ActionOptions(cooldown=Duration.constant(1))
        assert gate.is_active(options, "a", 0)

    def test_computed_cooldown_sees_active_item(self):
        seen = []

        def per_item(value, index):
            seen.append((value, index))
            return 1.0

        gate = CooldownGate(Duration.computed(per_item), FakeClock())
        gate.is_active(USER_INTERACTION, "b", 1)
        assert seen == [("b", 1)]

    def test_non_positive_constant_rejected_at_construction(self):
        with pytest.raises(CooldownDurationError):
            CooldownGate(Duration.constant(0), FakeClock())

    def test_non_positive_computed_rejected_when_resolved(self):
        gate = CooldownGate(Duration.computed(lambda value, index: -1), FakeClock())
        with pytest.raises(CooldownDurationError):
            gate.is_active(USER_INTERACTION, "a", 0)
