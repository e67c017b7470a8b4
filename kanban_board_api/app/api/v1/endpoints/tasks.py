"""
Task endpoints for API v1.

Tasks are addressed through their board: the board id scopes the
search for the task among that board's columns.  ``GET /tasks`` is the
exception and lists the tasks of every board.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from kanban_board_api.app.api.responses import envelope
from kanban_board_api.app.schemas.response import ApiResponse
from kanban_board_api.app.schemas.task import TaskCreate, TaskUpdate
from kanban_board_api.app.services.task_service import TaskService

router = APIRouter()


@router.get("/tasks", response_model=ApiResponse)
async def get_tasks() -> JSONResponse:
    """Return every task of every column together with the total count."""
    tasks = await TaskService.get_all_tasks()
    return envelope(status.HTTP_200_OK, data=tasks, count=len(tasks))


@router.post(
    "/boards/{board_id}/tasks",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(board_id: str, payload: TaskCreate) -> JSONResponse:
    """Create a task in ``columnId``.

    ``title``, ``status`` and ``columnId`` are required;
    ``description``, ``priority`` and ``dueDate`` are optional.
    """
    task = await TaskService.create_task(board_id, payload)
    return envelope(status.HTTP_201_CREATED, "Task created successfully", task)


@router.patch("/boards/{board_id}/tasks/{task_id}", response_model=ApiResponse)
async def update_task(board_id: str, task_id: str, payload: TaskUpdate) -> JSONResponse:
    """Update a task; a different ``columnId`` moves it to that column."""
    task = await TaskService.update_task(board_id, task_id, payload)
    return envelope(status.HTTP_200_OK, "Task updated successfully", task)


@router.delete("/boards/{board_id}/tasks/{task_id}", response_model=ApiResponse)
async def delete_task(board_id: str, task_id: str) -> JSONResponse:
    """Delete a task and return its last state."""
    task = await TaskService.delete_task(board_id, task_id)
    return envelope(status.HTTP_200_OK, "Task deleted successfully", task)
