"""Chat permission administration."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.chat_role import ChatPermission
from chattask.domain.exceptions import ChatPermissionNotFoundError, DuplicateNameError
from chattask.domain.ports.repositories import ChatPermissionRepository
from chattask.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class CreateChatPermissionCommand(Command[ChatPermission]):
    name: str


class CreateChatPermissionHandler(CommandHandler[ChatPermission]):
    def __init__(
        self, permission_repository: ChatPermissionRepository, unit_of_work: UnitOfWork
    ):
        self._permission_repository = permission_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: CreateChatPermissionCommand) -> ChatPermission:
        if await self._permission_repository.get_by_name(command.name) is not None:
            raise DuplicateNameError("permission", command.name)

        try:
            permission = await self._permission_repository.create(command.name)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise
        return permission


@dataclass(frozen=True)
class DeleteChatPermissionCommand(Command[None]):
    permission_id: int


class DeleteChatPermissionHandler(CommandHandler[None]):
    def __init__(
        self, permission_repository: ChatPermissionRepository, unit_of_work: UnitOfWork
    ):
        self._permission_repository = permission_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteChatPermissionCommand) -> None:
        try:
            if not await self._permission_repository.delete(command.permission_id):
                raise ChatPermissionNotFoundError(command.permission_id)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise
