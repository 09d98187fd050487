"""Task status lookups."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.task import TaskStatus
from chattask.domain.exceptions import TaskStatusNotFoundError
from chattask.domain.ports.repositories import TaskStatusRepository


@dataclass(frozen=True)
class GetTaskStatusQuery(Query[TaskStatus]):
    status_id: int


class GetTaskStatusHandler(QueryHandler[TaskStatus]):
    def __init__(self, status_repository: TaskStatusRepository):
        self._status_repository = status_repository

    async def execute(self, query: GetTaskStatusQuery) -> TaskStatus:
        status = await self._status_repository.get_by_id(query.status_id)
        if status is None:
            raise TaskStatusNotFoundError(query.status_id)
        return status


@dataclass(frozen=True)
class ListTaskStatusesQuery(Query[list[TaskStatus]]):
    pass


class ListTaskStatusesHandler(QueryHandler[list[TaskStatus]]):
    def __init__(self, status_repository: TaskStatusRepository):
        self._status_repository = status_repository

    async def execute(self, query: ListTaskStatusesQuery) -> list[TaskStatus]:
        return await self._status_repository.list_all()
