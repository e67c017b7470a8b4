"""
Pydantic models for boards.

A board is a named, ordered list of column references.  Columns are
stored as separate documents; the board only keeps their ids.
"""

from typing import List, Optional

from .base import KanbanModel


class Board(KanbanModel):
    """Stored board document."""

    id: str
    created_at: str
    name: str
    columns: List[str]


class BoardCreate(KanbanModel):
    """Payload for ``POST /createBoard``.

    The name is optional at the schema level so that a missing value is
    reported by the service as a validation failure with the usual
    envelope.
    """

    board_name: Optional[str] = None
