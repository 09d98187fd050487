"""SQLAlchemy Task Status Repository Implementation."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.task import TaskStatus
from chattask.domain.ports.repositories.task_status_repository import (
    TaskStatusRepository,
)
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import status_to_entity
from chattask.infrastructure.persistence.models import TaskStatusModel


class SqlAlchemyTaskStatusRepository(TaskStatusRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, status_id: int) -> Optional[TaskStatus]:
        with database_errors("load task status"):
            record = await self._session.get(TaskStatusModel, status_id)
        return status_to_entity(record) if record else None

    async def get_by_name(self, name: str) -> Optional[TaskStatus]:
        with database_errors("load task status"):
            record = await self._session.scalar(
                select(TaskStatusModel).where(TaskStatusModel.name == name)
            )
        return status_to_entity(record) if record else None

    async def list_all(self) -> list[TaskStatus]:
        with database_errors("list task statuses"):
            records = (
                await self._session.scalars(select(TaskStatusModel).order_by(TaskStatusModel.id))
            ).all()
        return [status_to_entity(record) for record in records]

    async def create(self, name: str) -> TaskStatus:
        with database_errors("create task status"):
            record = TaskStatusModel(name=name)
            self._session.add(record)
            await self._session.flush()
        return status_to_entity(record)

    async def delete(self, status_id: int) -> bool:
        with database_errors("delete task status"):
            record = await self._session.get(TaskStatusModel, status_id)
            if record is None:
                return False
            await self._session.delete(record)
            await self._session.flush()
        return True
