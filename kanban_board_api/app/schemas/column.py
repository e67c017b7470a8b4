"""Pydantic models for columns and the tasks embedded in them."""

from typing import List, Optional

from .base import KanbanModel
from .task import Task


class Column(KanbanModel):
    """Stored column document.

    ``board`` is the id of the owning board and ``tasks`` is the
    ordered list of tasks owned by this column.
    """

    id: str
    created_at: str
    name: str
    board: str
    tasks: List[Task]


class ColumnCreate(KanbanModel):
    """Payload for ``POST /boards/{board_id}/columns``."""

    column_name: Optional[str] = None
