"""
Operations on the task list embedded in a column document.

Tasks have no table of their own: a task is an entry in
``Column.tasks``.  These helpers edit that list in memory; the caller
is responsible for saving the column afterwards.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from kanban_board_api.app.schemas.column import Column
from kanban_board_api.app.schemas.task import Task


class TaskRepository:
    """In-memory edits of ``Column.tasks``."""

    @staticmethod
    def append(column: Column, task: Task) -> Task:
        """Add ``task`` to the end of the column's list.

        Only this column is checked for a duplicate id; uniqueness across
        columns is up to the caller.
        """
        if any(existing.id == task.id for existing in column.tasks):
            raise ValueError(f"Task {task.id} already exists in column {column.id}")
        column.tasks.append(task)
        return task

    @staticmethod
    def locate(columns: Iterable[Column], task_id: str) -> Optional[Tuple[Column, int]]:
        """Find the first column holding ``task_id``.

        Columns are scanned in the order given and the search stops at
        the first match.  Returns ``(column, index)`` or ``None``.
        """
        for column in columns:
            for index, task in enumerate(column.tasks):
                if task.id == task_id:
                    return column, index
        return None

    @staticmethod
    def remove_at(column: Column, index: int) -> Task:
        """Remove and return the task at ``index``; later tasks shift left."""
        return column.tasks.pop(index)

    @staticmethod
    def replace_at(column: Column, index: int, task: Task) -> Task:
        """Overwrite the task at ``index`` keeping its position."""
        column.tasks[index] = task
        return task
