"""
Tasks API Router - task creation, status changes and lookups.

Creating a task reaches out to the user, chat and file services before the
row is written; any of them failing maps to 502.
"""

from logging import getLogger
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from chattask.application.commands.tasks import (
    CreateTaskCommand,
    CreateTaskHandler,
    UpdateTaskStatusCommand,
    UpdateTaskStatusHandler,
)
from chattask.application.dto import FileDTO, TaskDTO, TaskListItemDTO, TaskResponseDTO
from chattask.application.queries.tasks import (
    GetTaskHandler,
    GetTaskQuery,
    ListUserTasksHandler,
    ListUserTasksQuery,
)
from chattask.config.settings import Config
from chattask.domain.exceptions import (
    DatabaseError,
    FileReferenceNotFoundError,
    GatewayError,
    TaskNotFoundError,
    TaskStatusNotFoundError,
)
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId
from chattask.presentation.dependencies.identity import parse_user_id

logger = getLogger(__name__)

NIL_UUID = UUID(int=0)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateTaskRequest(BaseModel):
    """Request body for creating a task. A nil UUID counts as absent."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    creator_id: UUID
    executor_id: Optional[UUID] = None
    chat_id: Optional[UUID] = None
    file_ids: list[int] = Field(default_factory=list)


class SuccessResponse(BaseModel):
    success: bool


def _optional_id(value: Optional[UUID]) -> Optional[str]:
    if value is None or value == NIL_UUID:
        return None
    return str(value)


# ==================== ROUTERS ====================

router = APIRouter(prefix="/tasks", tags=["tasks"])
users_router = APIRouter(prefix="/users", tags=["tasks"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=TaskDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_task(
    request: CreateTaskRequest,
    handler: FromDishka[CreateTaskHandler],
):
    """Create a task in the "created" status and notify its executor."""
    executor_id = _optional_id(request.executor_id)
    chat_id = _optional_id(request.chat_id)
    command = CreateTaskCommand(
        title=request.title,
        creator_id=UserId(str(request.creator_id)),
        description=request.description,
        executor_id=UserId(executor_id) if executor_id else None,
        chat_id=ChatId(chat_id) if chat_id else None,
        file_ids=tuple(request.file_ids),
    )
    try:
        task = await handler.execute(command)
    except TaskStatusNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileReferenceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GatewayError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return TaskDTO.from_entity(task)


@router.patch("/{task_id}/status/{status_id}", response_model=SuccessResponse)
@inject
async def update_task_status(
    task_id: int,
    status_id: int,
    handler: FromDishka[UpdateTaskStatusHandler],
):
    try:
        await handler.execute(UpdateTaskStatusCommand(task_id=task_id, status_id=status_id))
    except (TaskStatusNotFoundError, TaskNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    logger.info(f"[Tasks] Task {task_id} moved to status {status_id}")
    return SuccessResponse(success=True)


@router.get("/{task_id}", response_model=TaskResponseDTO)
@inject
async def get_task(task_id: int, handler: FromDishka[GetTaskHandler]):
    """A task with its attached files."""
    try:
        result = await handler.execute(GetTaskQuery(task_id=task_id))
    except TaskNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GatewayError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    files = [FileDTO.from_info(f) for f in result.files]
    return TaskResponseDTO(task=TaskDTO.from_entity(result.task), files=files or None)


@users_router.get("/{user_id}/tasks", response_model=list[TaskListItemDTO])
@inject
async def list_user_tasks(
    user_id: str,
    handler: FromDishka[ListUserTasksHandler],
    limit: int = Query(Config.TASKS_DEFAULT_LIMIT, ge=1),
    offset: int = Query(0, ge=0),
):
    """Tasks assigned to the user as executor, newest first."""
    query = ListUserTasksQuery(user_id=parse_user_id(user_id), limit=limit, offset=offset)
    try:
        tasks = await handler.execute(query)
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [TaskListItemDTO.from_entity(task) for task in tasks]
