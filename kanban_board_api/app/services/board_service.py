"""
Service for boards and their columns.

A board keeps the ids of its columns and each column points back at its
board.  Both sides are written by this service and always in the same
order:

* adding a column saves the column first, then the board;
* deleting a column saves the board first, then deletes the column.

There is no transaction across the two writes.  If the second one
fails the first is not undone; a new column may exist without being
listed on its board, or a removed column may linger unreferenced.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from kanban_board_api.app.core import store
from kanban_board_api.app.core.errors import NotFoundError, PreconditionError, ValidationError
from kanban_board_api.app.core.identifiers import new_id, utc_timestamp
from kanban_board_api.app.schemas.board import Board
from kanban_board_api.app.schemas.column import Column

logger = logging.getLogger(__name__)


class BoardService:
    """Service class for board and column lifecycle."""

    @classmethod
    async def create_board(cls, name: Optional[str]) -> Board:
        """Create an empty board named ``name``.

        Raises
        ------
        ValidationError
            If ``name`` is missing or empty.
        """
        logger.debug("Create board requested: %r", name)
        if not name:
            raise ValidationError("Board name is required")
        board = Board(id=new_id(), created_at=utc_timestamp(), name=name, columns=[])
        store.boards.insert(board)
        logger.info("Created board %s (%s)", board.id, board.name)
        return board

    @classmethod
    async def get_board(cls, board_id: str) -> Board:
        """Return the board or raise ``NotFoundError``."""
        board = store.boards.find_by_id(board_id)
        if board is None:
            raise NotFoundError("Board not found")
        return board

    @classmethod
    async def list_columns(cls, board_id: str) -> List[Column]:
        """Return the board's columns in the order the board lists them.

        Ids listed on the board whose column document is missing are
        skipped.
        """
        board = await cls.get_board(board_id)
        by_id = {column.id: column for column in store.columns.find_by_filter(board=board_id)}
        return [by_id[column_id] for column_id in board.columns if column_id in by_id]

    @classmethod
    async def add_column(cls, board_id: str, column_name: Optional[str]) -> Column:
        """Create a column on ``board_id`` and register it on the board.

        Raises
        ------
        ValidationError
            If ``column_name`` is missing or empty.
        NotFoundError
            If the board does not exist.
        """
        if not column_name:
            raise ValidationError("Column name is required")
        board = await cls.get_board(board_id)

        column = Column(
            id=new_id(),
            created_at=utc_timestamp(),
            name=column_name,
            board=board.id,
            tasks=[],
        )
        store.columns.insert(column)

        board.columns.append(column.id)
        store.boards.save(board)
        logger.info("Added column %s (%s) to board %s", column.id, column.name, board.id)
        return column

    @classmethod
    async def delete_column(cls, board_id: str, column_id: str) -> None:
        """Remove an empty column from its board and delete it.

        Raises
        ------
        NotFoundError
            If the board does not exist, or the column does not exist on
            that board.
        PreconditionError
            If the column still holds tasks.  Nothing is written.
        """
        board = await cls.get_board(board_id)
        column = store.columns.find_by_id(column_id)
        if column is None or column.board != board.id:
            raise NotFoundError("Column not found")

        if column.tasks:
            logger.warning(
                "Refused to delete column %s: %d task(s) remain", column.id, len(column.tasks)
            )
            raise PreconditionError(
                "Cannot delete column with existing tasks. Please move or delete tasks first."
            )

        board.columns = [existing for existing in board.columns if existing != column_id]
        store.boards.save(board)
        store.columns.delete_by_id(column_id)
        logger.info("Deleted column %s from board %s", column_id, board.id)
