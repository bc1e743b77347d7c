import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.dependencies import AppState, get_app_state
from api.repositories.local import LocalFileRepository


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "missions-data.json"


@pytest.fixture
def repository(data_file: Path) -> LocalFileRepository:
    return LocalFileRepository(data_file)


@pytest.fixture
def app_state(repository: LocalFileRepository) -> AppState:
    """AppState bound to a per-test data file, already initialized."""
    state = AppState(repository=repository)
    asyncio.run(state.initialize())
    return state


@pytest.fixture
def client(app_state: AppState):
    """TestClient whose requests all hit the per-test AppState."""
    from api.main import app

    app.dependency_overrides[get_app_state] = lambda: app_state
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
