"""
Logging setup for the board service.

Services log each board, column and task mutation at INFO and refused
operations at WARNING; the HTTP error handlers log store failures at
ERROR.  ``setup_logging`` routes all of that to the console and, when
``LOG_FILE`` is set, to a file as well.  uvicorn's own loggers keep
their handlers; only the application's records go through here.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "kanban_board_api"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once and set the application's level.

    Parameters
    ----------
    level : str
        Level name for the ``kanban_board_api`` loggers (e.g.
        ``"DEBUG"`` to see board-creation requests).  Unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # Handlers installed by uvicorn, pytest or an earlier create_app call.
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
