"""Tracker — the user aggregate: goals plus cumulative score."""

from __future__ import annotations

import logging

from questkernel.kernel.errors import ValidationError
from questkernel.kernel.goal_store import GoalStore
from questkernel.kernel.goals import Goal

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_STEP = 1000


class Tracker:
    """Owns the goal store and the running score.

    ``score`` is the sum of every delta ever returned by ``record_event``.
    It is accumulated, never recomputed from goal state, and may go negative.
    """

    def __init__(self, score: int = 0, level_step: int = DEFAULT_LEVEL_STEP):
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValidationError(f"score must be an integer, got {score!r}")
        if level_step < 1:
            raise ValidationError(f"level_step must be >= 1, got {level_step}")
        self._goals = GoalStore()
        self._score = score
        self._level_step = level_step

    def add_goal(self, goal: Goal) -> None:
        if not isinstance(goal, Goal):
            raise TypeError(f"Expected a Goal, got {type(goal).__name__}")
        self._goals.add(goal)
        logger.debug("Added %s goal %r", goal.goal_type, goal.name)

    def record_event(self, name: str) -> int:
        """Record one event on the named goal and return the points delta.

        Raises GoalNotFoundError before touching any state when the name is
        unknown.
        """
        goal = self._goals.get(name)
        delta = goal.record_event()
        self._score += delta
        logger.debug("Event on %r: %+d (score=%d)", goal.name, delta, self._score)
        return delta

    def get_goal(self, name: str) -> Goal:
        return self._goals.get(name)

    def list_goals(self) -> tuple[Goal, ...]:
        return self._goals.snapshot()

    def total_score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        """Derived from score: one level per ``level_step`` points, floor of 1."""
        return max(self._score // self._level_step + 1, 1)

    def __contains__(self, name: object) -> bool:
        return name in self._goals

    def __len__(self) -> int:
        return len(self._goals)
