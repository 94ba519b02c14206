import shutil
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from pomagotchi.session import GameSession
from pomagotchi.storage import SaveStore

TEST_DATA_DIR = Path("data-tests")


class FakeClock:
    """Clock returning a fixed day that tests can move around."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe data-tests/ before every test; saving must recreate it."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def store() -> SaveStore:
    return SaveStore(TEST_DATA_DIR)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(date(2024, 3, 14))


@pytest.fixture
def session(store: SaveStore, clock: FakeClock) -> GameSession:
    return GameSession(store, clock=clock)


@pytest.fixture
def client(session: GameSession):
    with TestClient(create_app(session=session)) as c:
        yield c
