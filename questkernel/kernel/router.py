"""Quest HTTP router — goals, events, score.

Each request loads the stored tracker, applies at most one mutation and
saves it back. Domain errors become HTTPExceptions here.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from questkernel.auth import verify_api_key
from questkernel.kernel import codec
from questkernel.kernel.errors import (
    AuthenticationError,
    DuplicateNameError,
    GoalNotFoundError,
    QuestError,
    UnknownGoalTypeError,
    ValidationError,
)
from questkernel.kernel.goals import ChecklistGoal, Goal, list_goal_types
from questkernel.kernel.models import EventResult, GoalCreate, GoalView, ScoreView
from questkernel.kernel.tracker import Tracker
from questkernel.storage import FileStorage, get_storage

router = APIRouter(prefix="/quest", tags=["quest"])


def to_http(exc: QuestError) -> HTTPException:
    if isinstance(exc, AuthenticationError):
        return HTTPException(status_code=401, detail=str(exc), headers={"WWW-Authenticate": "Bearer"})
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, DuplicateNameError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, GoalNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def _load(storage: FileStorage) -> Tracker:
    try:
        return storage.load_or_new()
    except QuestError as e:
        raise to_http(e)


def _save(storage: FileStorage, tracker: Tracker) -> None:
    try:
        storage.save(tracker)
    except QuestError as e:
        raise to_http(e)


def goal_view(goal: Goal) -> GoalView:
    view = GoalView(
        type=goal.goal_type,
        name=goal.name,
        points=goal.points,
        completed=goal.completed,
        display=goal.display_goal(),
    )
    if isinstance(goal, ChecklistGoal):
        view.target_count = goal.target_count
        view.current_count = goal.current_count
        view.completion_bonus = goal.completion_bonus
    return view


# ---------------------------------------------------------------------------
# /quest/goals
# ---------------------------------------------------------------------------


@router.get("/goals", response_model=list[GoalView])
async def goals_list(
    storage: FileStorage = Depends(get_storage),
    _: str = Depends(verify_api_key),
) -> list[GoalView]:
    tracker = _load(storage)
    return [goal_view(g) for g in tracker.list_goals()]


@router.post("/goals", response_model=GoalView, status_code=201)
async def goals_create(
    body: GoalCreate,
    storage: FileStorage = Depends(get_storage),
    _: str = Depends(verify_api_key),
) -> GoalView:
    tracker = _load(storage)
    try:
        goal = codec.build_goal(
            body.type,
            body.name,
            body.points,
            target_count=body.target_count,
            completion_bonus=body.completion_bonus,
        )
        tracker.add_goal(goal)
    except UnknownGoalTypeError as e:
        # unknown tag in a request body
        raise HTTPException(status_code=422, detail=str(e))
    except QuestError as e:
        raise to_http(e)
    _save(storage, tracker)
    return goal_view(goal)


@router.post("/goals/{name}/events", response_model=EventResult)
async def goals_record_event(
    name: str,
    storage: FileStorage = Depends(get_storage),
    _: str = Depends(verify_api_key),
) -> EventResult:
    tracker = _load(storage)
    try:
        delta = tracker.record_event(name)
    except QuestError as e:
        raise to_http(e)
    _save(storage, tracker)
    return EventResult(
        name=tracker.get_goal(name).name,
        points=delta,
        score=tracker.total_score(),
        level=tracker.level,
    )


# ---------------------------------------------------------------------------
# /quest/score
# ---------------------------------------------------------------------------


@router.get("/score", response_model=ScoreView)
async def score(
    storage: FileStorage = Depends(get_storage),
    _: str = Depends(verify_api_key),
) -> ScoreView:
    tracker = _load(storage)
    return ScoreView(score=tracker.total_score(), level=tracker.level, goal_count=len(tracker))


# ---------------------------------------------------------------------------
# /quest/goal-types
# ---------------------------------------------------------------------------


@router.get("/goal-types")
async def goal_types(
    _: str = Depends(verify_api_key),
) -> list[str]:
    return list_goal_types()
