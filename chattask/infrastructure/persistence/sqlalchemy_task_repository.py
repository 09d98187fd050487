"""SQLAlchemy Task Repository Implementation."""

import dataclasses
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.task import Task
from chattask.domain.exceptions import TaskNotFoundError, TaskStatusNotFoundError
from chattask.domain.ports.repositories.task_repository import TaskRepository
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import task_to_entity
from chattask.infrastructure.persistence.models import (
    TaskFileModel,
    TaskModel,
    TaskStatusModel,
)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        with database_errors("load task"):
            record = await self._session.get(TaskModel, task_id)
        return task_to_entity(record) if record else None

    async def list_by_executor(
        self, executor_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.executor_id == executor_id.value)
            .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        with database_errors("list tasks"):
            records = (await self._session.scalars(stmt)).all()
        return [task_to_entity(record) for record in records]

    async def add(self, task: Task) -> Task:
        with database_errors("create task"):
            record = TaskModel(
                title=task.title,
                description=task.description,
                status_id=task.status_id,
                creator_id=task.creator_id.value,
                executor_id=task.executor_id.value if task.executor_id else None,
                chat_id=task.chat_id.value if task.chat_id else None,
                created_at=task.created_at,
                files=[TaskFileModel(file_id=file_id) for file_id in task.file_ids],
            )
            self._session.add(record)
            await self._session.flush()
        return dataclasses.replace(task, id=record.id)

    async def update_status(self, task_id: int, status_id: int) -> None:
        with database_errors("update task status"):
            record = await self._session.get(TaskModel, task_id)
            if record is None:
                raise TaskNotFoundError(task_id)
            status = await self._session.get(TaskStatusModel, status_id)
            if status is None:
                raise TaskStatusNotFoundError(status_id)
            record.status = status
            record.status_id = status_id
            await self._session.flush()
