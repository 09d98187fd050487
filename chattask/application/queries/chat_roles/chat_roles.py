"""Chat role and permission lookups."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.chat_role import ChatPermission, ChatRole
from chattask.domain.exceptions import ChatRoleNotFoundError
from chattask.domain.ports.repositories import (
    ChatPermissionRepository,
    ChatRoleRepository,
)


@dataclass(frozen=True)
class ListChatRolesQuery(Query[list[ChatRole]]):
    pass


class ListChatRolesHandler(QueryHandler[list[ChatRole]]):
    def __init__(self, role_repository: ChatRoleRepository):
        self._role_repository = role_repository

    async def execute(self, query: ListChatRolesQuery) -> list[ChatRole]:
        return await self._role_repository.list_all()


@dataclass(frozen=True)
class GetChatRoleQuery(Query[ChatRole]):
    role_id: int


class GetChatRoleHandler(QueryHandler[ChatRole]):
    def __init__(self, role_repository: ChatRoleRepository):
        self._role_repository = role_repository

    async def execute(self, query: GetChatRoleQuery) -> ChatRole:
        role = await self._role_repository.get_by_id(query.role_id)
        if role is None:
            raise ChatRoleNotFoundError(query.role_id)
        return role


@dataclass(frozen=True)
class ListChatPermissionsQuery(Query[list[ChatPermission]]):
    pass


class ListChatPermissionsHandler(QueryHandler[list[ChatPermission]]):
    def __init__(self, permission_repository: ChatPermissionRepository):
        self._permission_repository = permission_repository

    async def execute(self, query: ListChatPermissionsQuery) -> list[ChatPermission]:
        return await self._permission_repository.list_all()
