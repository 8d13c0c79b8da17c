"""Tests for the four goal variants."""

from __future__ import annotations

import pytest

from questkernel.kernel.errors import ValidationError
from questkernel.kernel.goals import (
    ChecklistGoal,
    EternalGoal,
    NegativeGoal,
    SimpleGoal,
    get_goal_class,
    list_goal_types,
)


# ---------------------------------------------------------------------------
# Simple / Negative
# ---------------------------------------------------------------------------

class TestSimpleGoal:
    def test_first_event_awards_points(self):
        g = SimpleGoal("Run a marathon", 1000)
        assert g.record_event() == 1000
        assert g.completed is True

    def test_later_events_are_noops(self):
        g = SimpleGoal("Run a marathon", 1000)
        g.record_event()
        for _ in range(5):
            assert g.record_event() == 0
            assert g.completed is True

    def test_display_reflects_completion(self):
        g = SimpleGoal("Run", 10)
        assert g.display_goal() == "[ ] Run - Points: 10"
        g.record_event()
        assert g.display_goal() == "[X] Run - Points: 10"


class TestNegativeGoal:
    def test_first_event_deducts(self):
        g = NegativeGoal("Junk food", 200)
        assert g.record_event() == -200
        assert g.completed is True

    def test_points_stored_positive(self):
        g = NegativeGoal("Junk food", 200)
        g.record_event()
        assert g.points == 200

    def test_later_events_are_noops(self):
        g = NegativeGoal("Junk food", 200)
        g.record_event()
        assert g.record_event() == 0
        assert g.record_event() == 0

    def test_display(self):
        assert NegativeGoal("Junk food", 200).display_goal() == "[ ] Junk food - Lose Points: 200"


# ---------------------------------------------------------------------------
# Eternal
# ---------------------------------------------------------------------------

class TestEternalGoal:
    def test_always_awards_points(self):
        g = EternalGoal("Read", 100)
        assert [g.record_event() for _ in range(50)] == [100] * 50

    def test_never_completes(self):
        g = EternalGoal("Read", 100)
        for _ in range(10):
            g.record_event()
        assert g.completed is False

    def test_zero_points_allowed(self):
        assert EternalGoal("Breathe", 0).record_event() == 0

    def test_display(self):
        assert EternalGoal("Read", 100).display_goal() == "[∞] Read - Points per event: 100"


# ---------------------------------------------------------------------------
# Checklist
# ---------------------------------------------------------------------------

class TestChecklistGoal:
    def test_sequence_with_bonus(self):
        g = ChecklistGoal("Gym", 10, 3, 50)
        assert [g.record_event() for _ in range(3)] == [10, 10, 60]
        assert g.completed is True
        assert g.record_event() == 0
        assert g.current_count == 3

    def test_count_increments(self):
        g = ChecklistGoal("Gym", 10, 3, 50)
        g.record_event()
        assert g.current_count == 1
        assert g.completed is False

    def test_target_of_one(self):
        g = ChecklistGoal("Once", 5, 1, 7)
        assert g.record_event() == 12
        assert g.completed is True

    def test_default_bonus_zero(self):
        g = ChecklistGoal("Gym", 10, 1)
        assert g.completion_bonus == 0
        assert g.record_event() == 10

    def test_display_shows_progress(self):
        g = ChecklistGoal("Temple", 50, 10, 500)
        g.record_event()
        g.record_event()
        assert g.display_goal() == (
            "[ ] Temple - Completed 2/10 - Points per event: 50, Completion Bonus: 500"
        )


# ---------------------------------------------------------------------------
# Construction validation
# ---------------------------------------------------------------------------

class TestValidation:
    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name(self, name):
        with pytest.raises(ValidationError):
            SimpleGoal(name, 10)

    def test_negative_points(self):
        with pytest.raises(ValidationError):
            EternalGoal("Read", -1)

    def test_bool_points_rejected(self):
        with pytest.raises(ValidationError):
            SimpleGoal("Run", True)

    def test_non_int_points_rejected(self):
        with pytest.raises(ValidationError):
            SimpleGoal("Run", 1.5)

    @pytest.mark.parametrize("target", [0, -3])
    def test_non_positive_target(self, target):
        with pytest.raises(ValidationError):
            ChecklistGoal("Gym", 10, target, 0)

    def test_negative_bonus(self):
        with pytest.raises(ValidationError):
            ChecklistGoal("Gym", 10, 3, -1)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            NegativeGoal("", 1)

    def test_name_is_stripped(self):
        assert SimpleGoal("  Run  ", 1).name == "Run"


class TestGoalTypes:
    def test_four_types(self):
        assert list_goal_types() == ["Simple", "Eternal", "Checklist", "Negative"]

    def test_lookup(self):
        assert get_goal_class("Checklist") is ChecklistGoal

    def test_unknown(self):
        assert get_goal_class("Bonus") is None
