"""
Board and column endpoints for API v1.

Handlers are thin: they unpack the request, call ``BoardService`` and
wrap the result in the response envelope.  Domain errors raised by the
service are turned into error envelopes by the handlers registered in
``main.create_app``.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from kanban_board_api.app.api.responses import envelope
from kanban_board_api.app.schemas.board import BoardCreate
from kanban_board_api.app.schemas.column import ColumnCreate
from kanban_board_api.app.schemas.response import ApiResponse
from kanban_board_api.app.services.board_service import BoardService

router = APIRouter()


@router.post("/createBoard", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_board(payload: BoardCreate) -> JSONResponse:
    """Create an empty board from ``boardName``."""
    board = await BoardService.create_board(payload.board_name)
    return envelope(status.HTTP_201_CREATED, "Board created successfully", board)


@router.get("/boards/{board_id}", response_model=ApiResponse)
async def get_board(board_id: str) -> JSONResponse:
    """Return a board with the ids of its columns."""
    board = await BoardService.get_board(board_id)
    return envelope(status.HTTP_200_OK, data=board)


@router.get("/boards/{board_id}/columns", response_model=ApiResponse)
async def list_columns(board_id: str) -> JSONResponse:
    """Return the board's columns, tasks included, in board order."""
    columns = await BoardService.list_columns(board_id)
    return envelope(status.HTTP_200_OK, data=columns, count=len(columns))


@router.post(
    "/boards/{board_id}/columns",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_column(board_id: str, payload: ColumnCreate) -> JSONResponse:
    """Add a column named ``columnName`` to the end of the board."""
    column = await BoardService.add_column(board_id, payload.column_name)
    return envelope(status.HTTP_201_CREATED, "Column added successfully", column)


@router.delete("/boards/{board_id}/columns/{column_id}", response_model=ApiResponse)
async def delete_column(board_id: str, column_id: str) -> JSONResponse:
    """Delete an empty column.

    Columns that still hold tasks are refused with 400; move or delete
    the tasks first.
    """
    await BoardService.delete_column(board_id, column_id)
    return envelope(status.HTTP_200_OK, "Column deleted successfully")
