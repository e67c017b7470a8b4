"""
Top‑level package for the Kanban Board API.

This file makes ``kanban_board_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``kanban_board_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
