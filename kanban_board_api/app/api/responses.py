"""Helpers that wrap results in the ``{success, message, data, count}`` envelope."""

from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from kanban_board_api.app.schemas.base import KanbanModel


def _serialize(data: Any) -> Any:
    if isinstance(data, KanbanModel):
        return data.to_document()
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return data


def envelope(
    status_code: int,
    message: Optional[str] = None,
    data: Any = None,
    count: Optional[int] = None,
) -> JSONResponse:
    """Build a JSON response; ``success`` follows the status code.

    Keys whose value is ``None`` are left out.  The body matches
    ``ApiResponse``.
    """
    body: dict = {"success": status_code < 400}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = _serialize(data)
    if count is not None:
        body["count"] = count
    return JSONResponse(status_code=status_code, content=body)
