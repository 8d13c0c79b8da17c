"""Persisted record and HTTP contracts — Pydantic v2 models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GoalRecord(BaseModel):
    """One goal in the flat persisted record.

    Checklist counters are None for every other type and are dropped on dump
    (``exclude_none``). PascalCase keys from older save files are accepted
    on load.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(validation_alias=AliasChoices("type", "Type"))
    name: str = Field(validation_alias=AliasChoices("name", "Name"))
    points: int = Field(validation_alias=AliasChoices("points", "Points"))
    completed: bool = Field(default=False, validation_alias=AliasChoices("completed", "Completed"))
    target_count: int | None = Field(
        default=None,
        serialization_alias="targetCount",
        validation_alias=AliasChoices("targetCount", "TargetCount", "target_count"),
    )
    current_count: int | None = Field(
        default=None,
        serialization_alias="currentCount",
        validation_alias=AliasChoices("currentCount", "CurrentCount", "current_count"),
    )
    completion_bonus: int | None = Field(
        default=None,
        serialization_alias="completionBonus",
        validation_alias=AliasChoices("completionBonus", "CompletionBonus", "completion_bonus"),
    )


class TrackerRecord(BaseModel):
    """Top-level persisted object: cumulative score plus goals in order."""

    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(default=0, validation_alias=AliasChoices("score", "Score"))
    goals: list[GoalRecord] = Field(default_factory=list, validation_alias=AliasChoices("goals", "Goals"))


# ---------------------------------------------------------------------------
# HTTP bodies
# ---------------------------------------------------------------------------


class GoalCreate(BaseModel):
    type: str
    name: str
    points: int
    target_count: int | None = None
    completion_bonus: int = 0


class GoalView(BaseModel):
    type: str
    name: str
    points: int
    completed: bool
    target_count: int | None = None
    current_count: int | None = None
    completion_bonus: int | None = None
    display: str = ""


class EventResult(BaseModel):
    name: str
    points: int
    score: int
    level: int


class ScoreView(BaseModel):
    score: int
    level: int
    goal_count: int = 0
