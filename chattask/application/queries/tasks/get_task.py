"""GetTask Query - Task with its status and resolved files."""

from dataclasses import dataclass, field

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.task import Task
from chattask.domain.exceptions import TaskNotFoundError
from chattask.domain.ports.gateways import FileGateway, FileInfo
from chattask.domain.ports.repositories import TaskRepository


@dataclass
class GetTaskResult:
    task: Task
    files: list[FileInfo] = field(default_factory=list)


@dataclass(frozen=True)
class GetTaskQuery(Query[GetTaskResult]):
    task_id: int


class GetTaskHandler(QueryHandler[GetTaskResult]):
    def __init__(self, task_repository: TaskRepository, file_gateway: FileGateway):
        self._task_repository = task_repository
        self._file_gateway = file_gateway

    async def execute(self, query: GetTaskQuery) -> GetTaskResult:
        task = await self._task_repository.get_by_id(query.task_id)
        if task is None:
            raise TaskNotFoundError(query.task_id)

        files = [await self._file_gateway.get_file(file_id) for file_id in task.file_ids]
        return GetTaskResult(task=task, files=files)
