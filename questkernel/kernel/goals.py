"""Goal variants — the four completion behaviours.

Each goal owns its progress. The only mutator is ``record_event()``, which
returns the signed points delta earned by that event. Name, points and
variant never change after construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from questkernel.kernel.errors import ValidationError


def _check_int(value: object, field: str, minimum: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer, got {value!r}")
    if value < minimum:
        raise ValidationError(f"{field} must be >= {minimum}, got {value}")
    return value


class Goal(ABC):
    """Abstract trackable objective."""

    goal_type: str = ""

    def __init__(self, name: str, points: int):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Goal name must be a non-empty string")
        self._name = name.strip()
        self._points = _check_int(points, "points", 0)
        self._completed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> int:
        return self._points

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self._name.casefold()

    @abstractmethod
    def record_event(self) -> int:
        """Record one occurrence and return the points it earned."""

    @abstractmethod
    def display_goal(self) -> str:
        ...

    def _checkbox(self) -> str:
        return "[X]" if self._completed else "[ ]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, points={self._points}, completed={self._completed})"


class SimpleGoal(Goal):
    """Completed once; awards its points on that single event."""

    goal_type = "Simple"

    def record_event(self) -> int:
        if self._completed:
            return 0
        self._completed = True
        return self._points

    def display_goal(self) -> str:
        return f"{self._checkbox()} {self._name} - Points: {self._points}"


class EternalGoal(Goal):
    """Never completed; awards its points on every event."""

    goal_type = "Eternal"

    def record_event(self) -> int:
        return self._points

    def display_goal(self) -> str:
        return f"[∞] {self._name} - Points per event: {self._points}"


class ChecklistGoal(Goal):
    """Needs ``target_count`` events; pays per event plus a one-off bonus."""

    goal_type = "Checklist"

    def __init__(self, name: str, points: int, target_count: int, completion_bonus: int = 0):
        super().__init__(name, points)
        self._target_count = _check_int(target_count, "target_count", 1)
        self._completion_bonus = _check_int(completion_bonus, "completion_bonus", 0)
        self._current_count = 0

    @property
    def target_count(self) -> int:
        return self._target_count

    @property
    def current_count(self) -> int:
        return self._current_count

    @property
    def completion_bonus(self) -> int:
        return self._completion_bonus

    def record_event(self) -> int:
        if self._completed:
            return 0
        self._current_count += 1
        if self._current_count >= self._target_count:
            self._completed = True
            return self._points + self._completion_bonus
        return self._points

    def display_goal(self) -> str:
        return (
            f"{self._checkbox()} {self._name} - Completed {self._current_count}/{self._target_count}"
            f" - Points per event: {self._points}, Completion Bonus: {self._completion_bonus}"
        )

    def __repr__(self) -> str:
        return (
            f"ChecklistGoal(name={self._name!r}, points={self._points}, "
            f"progress={self._current_count}/{self._target_count}, "
            f"completion_bonus={self._completion_bonus}, completed={self._completed})"
        )


class NegativeGoal(Goal):
    """A bad habit: the first event deducts its points, once."""

    goal_type = "Negative"

    def record_event(self) -> int:
        if self._completed:
            return 0
        self._completed = True
        return -self._points

    def display_goal(self) -> str:
        return f"{self._checkbox()} {self._name} - Lose Points: {self._points}"


GOAL_TYPES: dict[str, type[Goal]] = {
    cls.goal_type: cls for cls in (SimpleGoal, EternalGoal, ChecklistGoal, NegativeGoal)
}


def get_goal_class(goal_type: str) -> type[Goal] | None:
    return GOAL_TYPES.get(goal_type)


def list_goal_types() -> list[str]:
    return list(GOAL_TYPES.keys())
