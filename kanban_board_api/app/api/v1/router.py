"""
Top‑level router for version 1 of the API.

The endpoint modules define their full paths (``/createBoard``,
``/boards/...``, ``/tasks``) so they are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import boards, info, tasks

router = APIRouter()

router.include_router(boards.router, tags=["boards"])
router.include_router(tasks.router, tags=["tasks"])
router.include_router(info.router, tags=["info"])
