"""Update Task Status Command."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.exceptions import TaskNotFoundError, TaskStatusNotFoundError
from chattask.domain.ports.repositories import TaskRepository, TaskStatusRepository
from chattask.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class UpdateTaskStatusCommand(Command[None]):
    task_id: int
    status_id: int


class UpdateTaskStatusHandler(CommandHandler[None]):
    def __init__(
        self,
        task_repository: TaskRepository,
        status_repository: TaskStatusRepository,
        unit_of_work: UnitOfWork,
    ):
        self._task_repository = task_repository
        self._status_repository = status_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: UpdateTaskStatusCommand) -> None:
        if await self._status_repository.get_by_id(command.status_id) is None:
            raise TaskStatusNotFoundError(command.status_id)
        if await self._task_repository.get_by_id(command.task_id) is None:
            raise TaskNotFoundError(command.task_id)

        try:
            await self._task_repository.update_status(command.task_id, command.status_id)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise
