"""Response envelope shared by all endpoints."""

from typing import Any, Optional

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """``{success, message?, data?, count?}`` as returned to clients."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    count: Optional[int] = None
