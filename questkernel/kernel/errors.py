"""Error taxonomy for the quest kernel.

Every failure raised by the core derives from QuestError so callers can
catch the whole family at once.
"""

from __future__ import annotations


class QuestError(Exception):
    """Base class for all quest kernel errors."""


class ValidationError(QuestError, ValueError):
    """Invalid goal construction parameters. Raised at creation time only."""


class DuplicateNameError(QuestError):
    def __init__(self, name: str):
        super().__init__(f"A goal named '{name}' already exists")
        self.name = name


class GoalNotFoundError(QuestError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Goal named '{self.name}' not found"


class UnknownGoalTypeError(QuestError):
    def __init__(self, goal_type: str):
        super().__init__(f"Unknown goal type: {goal_type}")
        self.goal_type = goal_type


class StorageError(QuestError):
    """Underlying read/write failure or a malformed persisted record."""


class AuthenticationError(QuestError):
    """Request did not present the owner key."""
