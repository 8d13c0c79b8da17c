"""Ordered, name-keyed goal collection owned by a Tracker."""

from __future__ import annotations

from typing import Iterator

from questkernel.kernel.errors import DuplicateNameError, GoalNotFoundError
from questkernel.kernel.goals import Goal


class GoalStore:
    """Goals in insertion order, looked up by case-insensitive name.

    Goals are only ever appended, never removed or renamed.
    """

    def __init__(self) -> None:
        # dicts keep insertion order
        self._goals: dict[str, Goal] = {}

    def add(self, goal: Goal) -> None:
        if goal.key in self._goals:
            raise DuplicateNameError(goal.name)
        self._goals[goal.key] = goal

    def get(self, name: str) -> Goal:
        goal = self._goals.get(name.strip().casefold())
        if goal is None:
            raise GoalNotFoundError(name)
        return goal

    def snapshot(self) -> tuple[Goal, ...]:
        return tuple(self._goals.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().casefold() in self._goals

    def __iter__(self) -> Iterator[Goal]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._goals)
