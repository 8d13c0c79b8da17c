"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from questkernel.kernel.goals import ChecklistGoal, EternalGoal, NegativeGoal, SimpleGoal
from questkernel.kernel.tracker import Tracker
from questkernel.main import app
from questkernel.storage import FileStorage, get_storage


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def tracker() -> Tracker:
    """The four-goal tracker used throughout the end-to-end scenario."""
    return make_tracker()


@pytest.fixture()
def storage(tmp_path) -> FileStorage:
    return FileStorage(tmp_path / "quest.json", level_step=1000)


@pytest.fixture()
def override_storage(storage):
    """Override the FastAPI dependency so requests hit a temp file."""
    app.dependency_overrides[get_storage] = lambda: storage
    yield storage
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_storage):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_tracker() -> Tracker:
    t = Tracker()
    t.add_goal(SimpleGoal("Run a marathon", 1000))
    t.add_goal(EternalGoal("Read", 100))
    t.add_goal(ChecklistGoal("Temple", 50, 10, 500))
    t.add_goal(NegativeGoal("Junk food", 200))
    return t
