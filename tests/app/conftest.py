from datetime import date
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from runplan.app.app import app
from runplan.app.dependencies import all_runs, planning_service, today
from runplan.plan.service import PlanningService

TODAY = date(2025, 10, 9)  # Thursday of week 3


@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def mock_service() -> Iterator[MagicMock]:
    service = MagicMock(spec=PlanningService)
    app.dependency_overrides[planning_service] = lambda: service
    yield service
    app.dependency_overrides.pop(planning_service, None)


@pytest.fixture
def runs_override(run_factory) -> Iterator[list]:
    runs = [
        run_factory.make({"date": date(2025, 9, 23), "distance": 11.0, "pace": "6:00"}),
        run_factory.make(
            {"date": date(2025, 9, 27), "distance": 8.0, "type": "LONG_RUN", "pace": "6:20"}
        ),
        run_factory.make({"date": date(2025, 10, 7), "distance": 6.0, "completed": False}),
    ]
    app.dependency_overrides[all_runs] = lambda: runs
    app.dependency_overrides[today] = lambda: TODAY
    yield runs
    app.dependency_overrides.pop(all_runs, None)
    app.dependency_overrides.pop(today, None)
