"""Persistence codec — Tracker <-> TrackerRecord.

Decoding rebuilds progress by replaying events on freshly built goals
instead of assigning counters, so a restored goal behaves exactly like one
that reached the same state through normal use. Replay deltas are thrown
away; the score comes straight from the record.

Unknown type tags abort the whole decode. Decoding always builds a new
Tracker, so an aborted load never touches the caller's current one.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from questkernel.kernel.errors import (
    DuplicateNameError,
    StorageError,
    UnknownGoalTypeError,
    ValidationError,
)
from questkernel.kernel.goals import ChecklistGoal, EternalGoal, Goal, get_goal_class
from questkernel.kernel.models import GoalRecord, TrackerRecord
from questkernel.kernel.tracker import DEFAULT_LEVEL_STEP, Tracker

logger = logging.getLogger(__name__)

# Tags found in older save files
LEGACY_TYPE_TAGS: dict[str, str] = {
    "SimpleGoal": "Simple",
    "EternalGoal": "Eternal",
    "ChecklistGoal": "Checklist",
    "NegativeGoal": "Negative",
}


def normalize_type(goal_type: str) -> str:
    return LEGACY_TYPE_TAGS.get(goal_type, goal_type)


def build_goal(
    goal_type: str,
    name: str,
    points: int,
    target_count: int | None = None,
    completion_bonus: int | None = None,
) -> Goal:
    """Construct a fresh (zero-progress) goal from its type tag.

    Raises UnknownGoalTypeError for an unrecognized tag and ValidationError
    for bad parameters.
    """
    cls = get_goal_class(normalize_type(goal_type))
    if cls is None:
        raise UnknownGoalTypeError(goal_type)
    if cls is ChecklistGoal:
        if target_count is None:
            raise ValidationError("Checklist goals require target_count")
        return ChecklistGoal(name, points, target_count, completion_bonus or 0)
    return cls(name, points)


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def encode_goal(goal: Goal) -> GoalRecord:
    record = GoalRecord(
        type=goal.goal_type,
        name=goal.name,
        points=goal.points,
        completed=goal.completed,
    )
    if isinstance(goal, ChecklistGoal):
        record.target_count = goal.target_count
        record.current_count = goal.current_count
        record.completion_bonus = goal.completion_bonus
    return record


def encode(tracker: Tracker) -> TrackerRecord:
    return TrackerRecord(
        score=tracker.total_score(),
        goals=[encode_goal(g) for g in tracker.list_goals()],
    )


def dumps(tracker: Tracker, indent: int | None = 2) -> str:
    return encode(tracker).model_dump_json(by_alias=True, exclude_none=True, indent=indent)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def _replay(goal: Goal, times: int) -> None:
    for _ in range(times):
        goal.record_event()  # delta discarded


def decode_goal(record: GoalRecord) -> Goal:
    """Rebuild one goal, replaying its recorded progress.

    Raises UnknownGoalTypeError for an unknown tag and StorageError when the
    record is invalid or its flags disagree with the replayed state.
    """
    try:
        goal = build_goal(
            record.type,
            record.name,
            record.points,
            target_count=record.target_count,
            completion_bonus=record.completion_bonus,
        )
    except ValidationError as e:
        raise StorageError(f"Invalid goal record {record.name!r}: {e}") from e

    if isinstance(goal, ChecklistGoal):
        count = record.current_count or 0
        if not 0 <= count <= goal.target_count:
            raise StorageError(
                f"Checklist {goal.name!r} has currentCount {count} outside 0..{goal.target_count}"
            )
        _replay(goal, count)
    elif isinstance(goal, EternalGoal):
        pass
    elif record.completed:
        _replay(goal, 1)

    if goal.completed != record.completed:
        raise StorageError(
            f"Goal {goal.name!r} replayed to completed={goal.completed}, record says {record.completed}"
        )
    return goal


def decode(record: TrackerRecord, level_step: int = DEFAULT_LEVEL_STEP) -> Tracker:
    """Build a new Tracker equivalent to the one that produced ``record``."""
    tracker = Tracker(score=record.score, level_step=level_step)
    for goal_record in record.goals:
        goal = decode_goal(goal_record)
        try:
            tracker.add_goal(goal)
        except DuplicateNameError as e:
            raise StorageError(f"Duplicate goal name in record: {e.name!r}") from e
    logger.debug("Decoded tracker with %d goals, score=%d", len(tracker), tracker.total_score())
    return tracker


def loads(text: str | bytes, level_step: int = DEFAULT_LEVEL_STEP) -> Tracker:
    try:
        record = TrackerRecord.model_validate_json(text)
    except PydanticValidationError as e:
        raise StorageError(f"Malformed tracker record: {e.error_count()} error(s)") from e
    return decode(record, level_step=level_step)
