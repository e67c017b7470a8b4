"""
Document store for boards and columns.

Each entity type lives in its own SQLite table as a JSON document
keyed by the entity id.  ``EntityStore`` offers the handful of
operations the services need: list, lookup by id, lookup by document
field, insert, full-document save and delete.  Every call opens and
closes its own connection; nothing is cached between calls.

Any ``sqlite3.Error`` is re-raised as ``StoreFailure`` so callers only
deal with domain errors.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Generic, List, Optional, Type, TypeVar

from kanban_board_api.app.core.db import get_connection
from kanban_board_api.app.core.errors import StoreFailure
from kanban_board_api.app.core.identifiers import new_id
from kanban_board_api.app.schemas.base import KanbanModel
from kanban_board_api.app.schemas.board import Board
from kanban_board_api.app.schemas.column import Column

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=KanbanModel)


class EntityStore(Generic[EntityT]):
    """Persistent collection of one entity type."""

    def __init__(self, table: str, model: Type[EntityT]) -> None:
        self.table = table
        self.model = model

    def _load(self, row: sqlite3.Row) -> EntityT:
        return self.model.model_validate(json.loads(row["document"]))

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection()
        except sqlite3.Error as exc:
            logger.error("Cannot open store for %s: %s", self.table, exc)
            raise StoreFailure(str(exc)) from exc

    def _query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.error("Query on %s failed: %s", self.table, exc)
            raise StoreFailure(str(exc)) from exc
        finally:
            conn.close()

    def _write(self, sql: str, params: tuple) -> int:
        conn = self._connect()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount
        except sqlite3.Error as exc:
            logger.error("Write to %s failed: %s", self.table, exc)
            raise StoreFailure(str(exc)) from exc
        finally:
            conn.close()

    def find_all(self) -> List[EntityT]:
        """Return every stored entity in insertion order."""
        rows = self._query(f"SELECT document FROM {self.table} ORDER BY rowid")
        return [self._load(row) for row in rows]

    def find_by_id(self, entity_id: str) -> Optional[EntityT]:
        """Return the entity with ``entity_id`` or ``None``."""
        rows = self._query(
            f"SELECT document FROM {self.table} WHERE id = ?", (entity_id,)
        )
        return self._load(rows[0]) if rows else None

    def find_by_filter(self, **criteria: Any) -> List[EntityT]:
        """Return entities whose top-level document fields equal ``criteria``.

        Keys are document (alias) names, e.g. ``find_by_filter(board=board_id)``.
        """
        clauses: List[str] = []
        params: List[Any] = []
        for field, value in criteria.items():
            clauses.append("json_extract(document, ?) = ?")
            params.extend([f"$.{field}", value])
        sql = f"SELECT document FROM {self.table}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY rowid"
        return [self._load(row) for row in self._query(sql, tuple(params))]

    def insert(self, entity: EntityT) -> EntityT:
        """Store a new entity, assigning an id if it has none."""
        if not getattr(entity, "id", None):
            entity.id = new_id()
        document = entity.to_document()
        self._write(
            f"INSERT INTO {self.table} (id, created_at, document) VALUES (?, ?, ?)",
            (entity.id, document.get("createdAt", ""), json.dumps(document)),
        )
        return entity

    def save(self, entity: EntityT) -> EntityT:
        """Replace the stored document with the entity's current state.

        An entity that is not stored yet is inserted.
        """
        document = entity.to_document()
        updated = self._write(
            f"UPDATE {self.table} SET document = ? WHERE id = ?",
            (json.dumps(document), entity.id),
        )
        if not updated:
            return self.insert(entity)
        return entity

    def delete_by_id(self, entity_id: str) -> bool:
        """Delete the entity; return ``True`` if a document was removed."""
        removed = self._write(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
        return removed > 0


boards = EntityStore("boards", Board)
columns = EntityStore("columns", Column)
