"""
- Give every test a fresh in-memory GameStore and override FastAPI's get_store
  so routes use it.
- Reset the process-wide max attempts so settings changes don't leak between tests.
- Provide a client fixture (TestClient(app)) that already has the override applied.
- Provide a small word list file on disk.
"""
import pytest

from fastapi.testclient import TestClient

from wordle.main import app, get_store
from wordle.settings import get_settings
from wordle.store import GameStore
from wordle.types import DEFAULT_MAX_ATTEMPTS

settings = get_settings()


@pytest.fixture(autouse=True)
def _reset_settings():
    saved_path = settings.wordlist_path
    saved_remote = settings.use_random_org
    settings.max_attempts = DEFAULT_MAX_ATTEMPTS
    settings.use_random_org = False
    yield
    settings.max_attempts = DEFAULT_MAX_ATTEMPTS
    settings.wordlist_path = saved_path
    settings.use_random_org = saved_remote


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
    return TestClient(app)


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "wordlist.txt"
    path.write_text("apple\ncrane\n\nslate\n", encoding="utf-8")
    return path
