"""ListUserTasks Query - Tasks assigned to a user as executor."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.task import Task
from chattask.domain.ports.repositories import TaskRepository
from chattask.domain.value_objects.user_id import UserId
from chattask.config.settings import Config


@dataclass(frozen=True)
class ListUserTasksQuery(Query[list[Task]]):
    user_id: UserId
    limit: int = Config.TASKS_DEFAULT_LIMIT
    offset: int = 0


class ListUserTasksHandler(QueryHandler[list[Task]]):
    def __init__(self, task_repository: TaskRepository):
        self._task_repository = task_repository

    async def execute(self, query: ListUserTasksQuery) -> list[Task]:
        return await self._task_repository.list_by_executor(
            query.user_id, limit=query.limit, offset=query.offset
        )
