"""Tests for the SQLite-backed document store."""

import pytest

from kanban_board_api.app.core import store
from kanban_board_api.app.core.errors import StoreFailure
from kanban_board_api.app.core.store import EntityStore
from kanban_board_api.app.schemas.board import Board
from kanban_board_api.app.schemas.column import Column
from kanban_board_api.app.schemas.task import Task


def make_board(name="Board", board_id=""):
    return Board(id=board_id, created_at="2025-01-01T00:00:00.000Z", name=name, columns=[])


def make_column(board_id, name="Column"):
    return Column(id="", created_at="2025-01-01T00:00:00.000Z", name=name, board=board_id, tasks=[])


def test_insert_assigns_id_and_find_by_id():
    board = store.boards.insert(make_board("Sprint"))
    assert board.id

    loaded = store.boards.find_by_id(board.id)
    assert loaded is not None
    assert loaded.name == "Sprint"
    assert loaded.columns == []


def test_insert_keeps_given_id():
    store.boards.insert(make_board(board_id="fixed-id"))
    assert store.boards.find_by_id("fixed-id") is not None


def test_find_by_id_missing_returns_none():
    assert store.boards.find_by_id("does-not-exist") is None


def test_find_all_in_insertion_order():
    names = ["first", "second", "third"]
    for name in names:
        store.boards.insert(make_board(name))
    assert [board.name for board in store.boards.find_all()] == names


def test_save_replaces_document():
    board = store.boards.insert(make_board("Before"))
    board.name = "After"
    board.columns.append("col-1")
    store.boards.save(board)

    loaded = store.boards.find_by_id(board.id)
    assert loaded.name == "After"
    assert loaded.columns == ["col-1"]


def test_save_does_not_change_order():
    first = store.boards.insert(make_board("first"))
    store.boards.insert(make_board("second"))
    first.name = "first again"
    store.boards.save(first)
    assert [board.name for board in store.boards.find_all()] == ["first again", "second"]


def test_save_inserts_unknown_entity():
    store.boards.save(make_board("New", board_id="new-id"))
    assert store.boards.find_by_id("new-id").name == "New"


def test_find_by_filter_scopes_columns_to_board():
    store.columns.insert(make_column("board-a", "a1"))
    store.columns.insert(make_column("board-b", "b1"))
    store.columns.insert(make_column("board-a", "a2"))

    names = [column.name for column in store.columns.find_by_filter(board="board-a")]
    assert names == ["a1", "a2"]
    assert store.columns.find_by_filter(board="board-c") == []


def test_embedded_tasks_round_trip_without_null_placeholders():
    column = make_column("board-a")
    column.tasks.append(
        Task(id="t1", created_at="2025-01-01T00:00:00.000Z", title="Fix bug", status="open")
    )
    store.columns.insert(column)

    document = store.columns.find_by_id(column.id).to_document()
    assert document["tasks"] == [
        {"id": "t1", "createdAt": "2025-01-01T00:00:00.000Z", "title": "Fix bug", "status": "open"}
    ]


def test_delete_by_id():
    board = store.boards.insert(make_board())
    assert store.boards.delete_by_id(board.id) is True
    assert store.boards.find_by_id(board.id) is None
    assert store.boards.delete_by_id(board.id) is False


def test_storage_errors_become_store_failure():
    missing = EntityStore("no_such_table", Board)
    with pytest.raises(StoreFailure):
        missing.find_all()
    with pytest.raises(StoreFailure):
        missing.insert(make_board())


def test_init_db_is_idempotent():
    from kanban_board_api.app.core.db import init_db

    board = store.boards.insert(make_board("Kept"))
    assert init_db() == []
    assert store.boards.find_by_id(board.id).name == "Kept"
