"""Entry point for the Kanban Board API.

Starts the FastAPI application under uvicorn.  Host, port and log
level come from the same environment variables the application reads
(``HOST``, ``PORT``, ``LOG_LEVEL``); see ``kanban_board_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from kanban_board_api.app.core.config import settings
from kanban_board_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
