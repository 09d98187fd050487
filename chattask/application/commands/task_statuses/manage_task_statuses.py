"""Create / Delete Task Status Commands."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.task import TaskStatus
from chattask.domain.exceptions import (
    TaskStatusAlreadyExistsError,
    TaskStatusNotFoundError,
)
from chattask.domain.ports.repositories import TaskStatusRepository
from chattask.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class CreateTaskStatusCommand(Command[TaskStatus]):
    name: str


class CreateTaskStatusHandler(CommandHandler[TaskStatus]):
    def __init__(self, status_repository: TaskStatusRepository, unit_of_work: UnitOfWork):
        self._status_repository = status_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: CreateTaskStatusCommand) -> TaskStatus:
        if await self._status_repository.get_by_name(command.name) is not None:
            raise TaskStatusAlreadyExistsError(command.name)

        try:
            status = await self._status_repository.create(command.name)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise
        return status


@dataclass(frozen=True)
class DeleteTaskStatusCommand(Command[None]):
    status_id: int


class DeleteTaskStatusHandler(CommandHandler[None]):
    def __init__(self, status_repository: TaskStatusRepository, unit_of_work: UnitOfWork):
        self._status_repository = status_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteTaskStatusCommand) -> None:
        try:
            deleted = await self._status_repository.delete(command.status_id)
            if not deleted:
                raise TaskStatusNotFoundError(command.status_id)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise
