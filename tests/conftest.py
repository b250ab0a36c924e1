import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from room.api.main import app
from room.api.observability.metrics import reset_requests
from room.core.observability.metrics import reset_metrics

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    # Make runtime behave deterministically in tests
    os.environ.setdefault("ROOM_ENV", "dev")
    os.environ.setdefault("ROOM_SCENARIO_DIR", str(REPO_ROOT / "scenarios"))


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    reset_requests()
    yield
    reset_metrics()
    reset_requests()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def scenario_dir():
    return REPO_ROOT / "scenarios"
