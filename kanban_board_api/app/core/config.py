"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Kanban Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the board and task routes are mounted.  Empty
    # by default so that ``/createBoard``, ``/tasks`` etc. sit at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Path to the SQLite file backing the document store.  A relative
    # path is resolved against the project root by the ``db`` module.
    # Each store call opens its own connection, so ``:memory:`` cannot
    # be used here.
    database_url: str = os.getenv("DATABASE_URL", "kanban_board.db")


# Environment variables must be set before this module is imported.
settings = Settings()
