"""Task DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from chattask.application.dto.file import FileDTO
from chattask.domain.entities.task import Task


class TaskStatusDTO(BaseModel):
    id: int
    name: str


class TaskDTO(BaseModel):
    id: int
    title: str
    description: str = ""
    status_id: int
    status: Optional[TaskStatusDTO] = None
    creator_id: str
    executor_id: Optional[str] = None
    chat_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status_id=task.status_id,
            status=(
                TaskStatusDTO(id=task.status.id, name=task.status.name)
                if task.status
                else None
            ),
            creator_id=task.creator_id.value,
            executor_id=task.executor_id.value if task.executor_id else None,
            chat_id=task.chat_id.value if task.chat_id else None,
            created_at=task.created_at,
        )


class TaskResponseDTO(BaseModel):
    task: TaskDTO
    files: Optional[list[FileDTO]] = None


class TaskListItemDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    status: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskListItemDTO":
        return cls(
            id=task.id,
            title=task.title,
            status=task.status.name if task.status else "",
            created_at=task.created_at,
        )
