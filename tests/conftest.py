"""
- Provide a fresh GameStore per test and override FastAPI's get_store so routes use it.
- Provide a client fixture (TestClient(app)) that already has the override applied.
"""
import os
import pytest

from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")
# Never hit random.org from the test suite
os.environ["CODEBREAKER_RANDOM_SOURCE"] = "local"

from codebreaker.main import app, get_store
from codebreaker.store import GameStore


@pytest.fixture
def store() -> GameStore:
    return GameStore()


@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use this test's store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    # Talks to the FastAPI app in-process, no server needed.
    return TestClient(app)
