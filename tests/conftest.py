import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from kanban_board_api.app.core.config import settings
from kanban_board_api.app.core.db import init_db
from kanban_board_api.app.main import app
from kanban_board_api.app.services.board_service import BoardService


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """
    Points the store at a fresh SQLite file for every test.
    """
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "kanban.db"))
    init_db()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest_asyncio.fixture
async def board():
    return await BoardService.create_board("Sprint 1")


@pytest_asyncio.fixture
async def todo_column(board):
    return await BoardService.add_column(board.id, "To Do")


@pytest_asyncio.fixture
async def done_column(board, todo_column):
    return await BoardService.add_column(board.id, "Done")
