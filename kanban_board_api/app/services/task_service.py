"""
Service for tasks.

Tasks are embedded in column documents, so every task operation loads
one or more columns, edits their ``tasks`` lists through
``TaskRepository`` and saves the columns back.  Lookups by task id are
scoped to the columns of one board and stop at the first column that
holds the id.

Moving a task between columns saves the source column before the
target column.  If the second save fails the task is gone from both;
no rollback is attempted.  Saves replace whole column documents, so
two concurrent edits of the same column end with the last writer's
version.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from kanban_board_api.app.core import store
from kanban_board_api.app.core.errors import NotFoundError, ValidationError
from kanban_board_api.app.core.identifiers import new_id, utc_timestamp
from kanban_board_api.app.schemas.column import Column
from kanban_board_api.app.schemas.task import Task, TaskCreate, TaskUpdate
from kanban_board_api.app.services.task_repository import TaskRepository

logger = logging.getLogger(__name__)

# Applied whenever present in an update, including as null.
NULLABLE_FIELDS = ("description", "priority", "due_date")


class TaskService:
    """Service class for creating, moving, updating and deleting tasks."""

    @staticmethod
    def _find_board_column(board_id: str, column_id: str, message: str) -> Column:
        column = store.columns.find_by_id(column_id)
        if column is None or column.board != board_id:
            raise NotFoundError(message)
        return column

    @staticmethod
    def _locate(board_id: str, task_id: str) -> Tuple[Column, int]:
        located = TaskRepository.locate(store.columns.find_by_filter(board=board_id), task_id)
        if located is None:
            raise NotFoundError("Task not found")
        return located

    @staticmethod
    def _apply_updates(task: Task, data: TaskUpdate) -> Task:
        """Return a copy of ``task`` with the requested changes.

        ``title`` and ``status`` only replace the current value when the
        new one is non-empty.  The nullable fields replace it whenever
        they were sent, which is how a client clears them.
        """
        updated = task.model_copy()
        if data.title and data.title.strip():
            updated.title = data.title.strip()
        if data.status:
            updated.status = data.status
        for field in NULLABLE_FIELDS:
            if field in data.model_fields_set:
                setattr(updated, field, getattr(data, field))
        return updated

    @classmethod
    async def get_all_tasks(cls) -> List[Task]:
        """Return the tasks of every column, column by column."""
        tasks: List[Task] = []
        for column in store.columns.find_all():
            tasks.extend(column.tasks)
        return tasks

    @classmethod
    async def create_task(cls, board_id: str, data: TaskCreate) -> Task:
        """Create a task at the end of the column named by ``data.column_id``.

        Optional fields are stored only when a non-empty value was sent.

        Raises
        ------
        ValidationError
            If title, status or column id is missing.
        NotFoundError
            If the board does not exist, or the column does not exist on
            that board.
        """
        if not (data.title and data.title.strip()) or not data.status or not data.column_id:
            raise ValidationError("Title, status, and columnId are required")
        if store.boards.find_by_id(board_id) is None:
            raise NotFoundError("Board not found")
        column = cls._find_board_column(board_id, data.column_id, "Column not found")

        fields = {
            "id": new_id(),
            "created_at": utc_timestamp(),
            "title": data.title.strip(),
            "status": data.status,
        }
        for field in NULLABLE_FIELDS:
            value = getattr(data, field)
            if value is not None and value != "":
                fields[field] = value
        task = Task(**fields)

        TaskRepository.append(column, task)
        store.columns.save(column)
        logger.info("Created task %s in column %s", task.id, column.id)
        return task

    @classmethod
    async def update_task(cls, board_id: str, task_id: str, data: TaskUpdate) -> Task:
        """Update a task's fields and optionally move it to another column.

        The task is searched among the columns of ``board_id``.  When
        ``data.column_id`` names a different column of the same board
        the updated task is removed from its column and appended to the
        target; both columns are saved, source first.

        Raises
        ------
        NotFoundError
            If the task is not on the board, or the target column does
            not exist on the board.
        """
        source, index = cls._locate(board_id, task_id)

        if data.column_id and data.column_id != source.id:
            target = cls._find_board_column(board_id, data.column_id, "Target column not found")
            task = cls._apply_updates(source.tasks[index], data)
            TaskRepository.remove_at(source, index)
            store.columns.save(source)
            TaskRepository.append(target, task)
            store.columns.save(target)
            logger.info("Moved task %s from column %s to %s", task.id, source.id, target.id)
            return task

        task = cls._apply_updates(source.tasks[index], data)
        TaskRepository.replace_at(source, index, task)
        store.columns.save(source)
        logger.info("Updated task %s in column %s", task.id, source.id)
        return task

    @classmethod
    async def delete_task(cls, board_id: str, task_id: str) -> Task:
        """Remove a task from its column and return it.

        Raises
        ------
        NotFoundError
            If no column of the board holds the task.
        """
        column, index = cls._locate(board_id, task_id)
        task = TaskRepository.remove_at(column, index)
        store.columns.save(column)
        logger.info("Deleted task %s from column %s", task.id, column.id)
        return task
