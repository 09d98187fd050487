"""
Chat role administration.

Roles are global reference data; changing a role's permission set affects
every membership holding that role on the next permission check.
"""

import logging
from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.chat_role import ChatRole
from chattask.domain.exceptions import (
    ChatPermissionNotFoundError,
    ChatRoleNotFoundError,
    DuplicateNameError,
)
from chattask.domain.ports.repositories import (
    ChatPermissionRepository,
    ChatRoleRepository,
)
from chattask.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def _ensure_permissions_exist(
    permission_repository: ChatPermissionRepository, permission_ids: tuple[int, ...]
) -> None:
    for permission_id in permission_ids:
        if await permission_repository.get_by_id(permission_id) is None:
            raise ChatPermissionNotFoundError(permission_id)


@dataclass(frozen=True)
class CreateChatRoleCommand(Command[ChatRole]):
    name: str
    permission_ids: tuple[int, ...] = ()


class CreateChatRoleHandler(CommandHandler[ChatRole]):
    def __init__(
        self,
        role_repository: ChatRoleRepository,
        permission_repository: ChatPermissionRepository,
        unit_of_work: UnitOfWork,
    ):
        self._role_repository = role_repository
        self._permission_repository = permission_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: CreateChatRoleCommand) -> ChatRole:
        if await self._role_repository.get_by_name(command.name) is not None:
            raise DuplicateNameError("role", command.name)
        await _ensure_permissions_exist(self._permission_repository, command.permission_ids)

        try:
            role = await self._role_repository.create(command.name, list(command.permission_ids))
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(f"[ChatRoles] Role {role.name!r} created with id {role.id}")
        return role


@dataclass(frozen=True)
class DeleteChatRoleCommand(Command[None]):
    role_id: int


class DeleteChatRoleHandler(CommandHandler[None]):
    def __init__(self, role_repository: ChatRoleRepository, unit_of_work: UnitOfWork):
        self._role_repository = role_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteChatRoleCommand) -> None:
        try:
            if not await self._role_repository.delete(command.role_id):
                raise ChatRoleNotFoundError(command.role_id)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise


@dataclass(frozen=True)
class UpdateRolePermissionsCommand(Command[ChatRole]):
    role_id: int
    permission_ids: tuple[int, ...]


class UpdateRolePermissionsHandler(CommandHandler[ChatRole]):
    def __init__(
        self,
        role_repository: ChatRoleRepository,
        permission_repository: ChatPermissionRepository,
        unit_of_work: UnitOfWork,
    ):
        self._role_repository = role_repository
        self._permission_repository = permission_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: UpdateRolePermissionsCommand) -> ChatRole:
        if await self._role_repository.get_by_id(command.role_id) is None:
            raise ChatRoleNotFoundError(command.role_id)
        await _ensure_permissions_exist(self._permission_repository, command.permission_ids)

        try:
            role = await self._role_repository.set_permissions(
                command.role_id, list(command.permission_ids)
            )
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(
            f"[ChatRoles] Role {role.name!r} now grants {sorted(role.permission_names())}"
        )
        return role
