"""
SQLite backing for the board and column documents.

There are two document tables, ``boards`` and ``columns``.  Each row
holds one entity as JSON in ``document``, keyed by the entity id;
``created_at`` is copied out of the document for inspection only.
Tasks have no table: they live inside their column's document.

Schema changes are numbered entries in ``MIGRATIONS``; ``init_db``
applies the ones not yet recorded in the ``migrations`` table.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: document tables for boards and columns
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS boards (
            id TEXT PRIMARY KEY,
            created_at TEXT NOT NULL,
            document TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS columns (
            id TEXT PRIMARY KEY,
            created_at TEXT NOT NULL,
            document TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path() -> str:
    """Resolve the SQLite file that holds the board and column documents.

    Absolute paths in ``settings.database_url`` are used directly;
    relative ones are resolved against the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Open a connection whose rows can be read by column name.

    The document store opens one connection per operation and closes it
    straight away, so nothing here is pooled or shared.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, committing on success and always closing."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def _schema_version(cursor: sqlite3.Cursor) -> int:
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    return row["version"] or 0


def init_db() -> List[int]:
    """Create the document tables and apply pending migrations.

    Safe to call on every start: migrations already recorded in the
    ``migrations`` table are skipped, and stored documents are left
    untouched.  Returns the versions applied by this call.
    """
    applied: List[int] = []
    with get_cursor() as cursor:
        current = _schema_version(cursor)
        for version, sql in MIGRATIONS:
            if version <= current:
                continue
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            applied.append(version)
    if applied:
        logger.info("Applied migrations %s to %s", applied, get_database_path())
    return applied
