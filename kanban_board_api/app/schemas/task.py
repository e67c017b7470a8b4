"""
Pydantic models for tasks.

Tasks are not stored on their own; they live inside the ``tasks`` list
of a column document.  ``status`` is free text and ``priority`` may be
a label or a number.  ``dueDate`` is either a plain date
(``2025-03-01``) or a full ISO-8601 timestamp as produced by
``Date.toISOString()`` in browsers.
"""

from datetime import date, datetime
from typing import Optional, Union

from pydantic import StrictFloat, StrictInt, StrictStr, field_validator

from .base import KanbanModel

# Strict members so that ``true`` is rejected instead of stored as ``1``.
Priority = Union[StrictStr, StrictInt, StrictFloat]

# ``date`` first: a bare date stays a date, anything with a time of day
# falls through to ``datetime``.
DueDate = Union[date, datetime]


class Task(KanbanModel):
    """A task as stored inside a column."""

    id: str
    created_at: str
    title: str
    status: str
    description: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[DueDate] = None


class TaskFields(KanbanModel):
    """Fields shared by the create and update payloads."""

    title: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[DueDate] = None
    column_id: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        # An empty string clears the date.
        if isinstance(v, str) and not v.strip():
            return None
        return v


class TaskCreate(TaskFields):
    """Payload for ``POST /boards/{board_id}/tasks``.

    ``columnId`` names the column the task is created in.
    """


class TaskUpdate(TaskFields):
    """Payload for ``PATCH /boards/{board_id}/tasks/{task_id}``.

    Only fields present in the request are considered.  ``title`` and
    ``status`` are applied when non-empty; ``description``,
    ``priority`` and ``dueDate`` are applied whenever they are present,
    even as ``null``.  Presence is read from ``model_fields_set``.
    A ``columnId`` different from the task's column moves the task.
    """
