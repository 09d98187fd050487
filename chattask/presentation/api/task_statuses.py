"""
Task Statuses API Router - the catalogue of task lifecycle states.

Registered before the tasks router so /tasks/statuses is not read as a task id.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, Field

from chattask.application.commands.task_statuses import (
    CreateTaskStatusCommand,
    CreateTaskStatusHandler,
    DeleteTaskStatusCommand,
    DeleteTaskStatusHandler,
)
from chattask.application.dto import TaskStatusDTO
from chattask.application.queries.task_statuses import (
    GetTaskStatusHandler,
    GetTaskStatusQuery,
    ListTaskStatusesHandler,
    ListTaskStatusesQuery,
)
from chattask.domain.exceptions import (
    DatabaseError,
    TaskStatusAlreadyExistsError,
    TaskStatusNotFoundError,
)


class CreateTaskStatusRequest(BaseModel):
    name: str = Field(min_length=1)


router = APIRouter(prefix="/tasks/statuses", tags=["task-statuses"])


@router.post("", response_model=TaskStatusDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_task_status(
    request: CreateTaskStatusRequest,
    handler: FromDishka[CreateTaskStatusHandler],
):
    try:
        task_status = await handler.execute(CreateTaskStatusCommand(name=request.name))
    except TaskStatusAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return TaskStatusDTO(id=task_status.id, name=task_status.name)


@router.get("", response_model=list[TaskStatusDTO])
@inject
async def list_task_statuses(handler: FromDishka[ListTaskStatusesHandler]):
    try:
        statuses = await handler.execute(ListTaskStatusesQuery())
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [TaskStatusDTO(id=s.id, name=s.name) for s in statuses]


@router.get("/{status_id}", response_model=TaskStatusDTO)
@inject
async def get_task_status(status_id: int, handler: FromDishka[GetTaskStatusHandler]):
    try:
        task_status = await handler.execute(GetTaskStatusQuery(status_id=status_id))
    except TaskStatusNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return TaskStatusDTO(id=task_status.id, name=task_status.name)


@router.delete(
    "/{status_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def delete_task_status(status_id: int, handler: FromDishka[DeleteTaskStatusHandler]):
    try:
        await handler.execute(DeleteTaskStatusCommand(status_id=status_id))
    except TaskStatusNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
