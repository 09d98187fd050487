"""SQLAlchemy Chat Role / Chat Permission Repository Implementations."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.chat_role import ChatPermission, ChatRole
from chattask.domain.exceptions import ChatRoleNotFoundError
from chattask.domain.ports.repositories.chat_permission_repository import (
    ChatPermissionRepository,
)
from chattask.domain.ports.repositories.chat_role_repository import ChatRoleRepository
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import (
    permission_to_entity,
    role_to_entity,
)
from chattask.infrastructure.persistence.models import (
    ChatPermissionModel,
    ChatRoleModel,
    chat_role_permissions,
)


class SqlAlchemyChatRoleRepository(ChatRoleRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _permissions(self, permission_ids: list[int]) -> list[ChatPermissionModel]:
        if not permission_ids:
            return []
        stmt = select(ChatPermissionModel).where(ChatPermissionModel.id.in_(permission_ids))
        return list((await self._session.scalars(stmt)).all())

    async def get_by_id(self, role_id: int) -> Optional[ChatRole]:
        with database_errors("load role"):
            record = await self._session.get(ChatRoleModel, role_id)
        return role_to_entity(record) if record else None

    async def get_by_name(self, name: str) -> Optional[ChatRole]:
        with database_errors("load role"):
            record = await self._session.scalar(
                select(ChatRoleModel).where(ChatRoleModel.name == name)
            )
        return role_to_entity(record) if record else None

    async def list_all(self) -> list[ChatRole]:
        with database_errors("list roles"):
            records = (
                await self._session.scalars(select(ChatRoleModel).order_by(ChatRoleModel.id))
            ).all()
        return [role_to_entity(record) for record in records]

    async def create(self, name: str, permission_ids: list[int]) -> ChatRole:
        with database_errors("create role"):
            record = ChatRoleModel(name=name, permissions=await self._permissions(permission_ids))
            self._session.add(record)
            await self._session.flush()
        return role_to_entity(record)

    async def set_permissions(self, role_id: int, permission_ids: list[int]) -> ChatRole:
        with database_errors("update role permissions"):
            record = await self._session.get(ChatRoleModel, role_id)
            if record is None:
                raise ChatRoleNotFoundError(role_id)
            record.permissions = await self._permissions(permission_ids)
            await self._session.flush()
        return role_to_entity(record)

    async def delete(self, role_id: int) -> bool:
        with database_errors("delete role"):
            record = await self._session.get(ChatRoleModel, role_id)
            if record is None:
                return False
            await self._session.delete(record)
            await self._session.flush()
        return True


class SqlAlchemyChatPermissionRepository(ChatPermissionRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, permission_id: int) -> Optional[ChatPermission]:
        with database_errors("load permission"):
            record = await self._session.get(ChatPermissionModel, permission_id)
        return permission_to_entity(record) if record else None

    async def get_by_name(self, name: str) -> Optional[ChatPermission]:
        with database_errors("load permission"):
            record = await self._session.scalar(
                select(ChatPermissionModel).where(ChatPermissionModel.name == name)
            )
        return permission_to_entity(record) if record else None

    async def list_all(self) -> list[ChatPermission]:
        with database_errors("list permissions"):
            records = (
                await self._session.scalars(
                    select(ChatPermissionModel).order_by(ChatPermissionModel.id)
                )
            ).all()
        return [permission_to_entity(record) for record in records]

    async def create(self, name: str) -> ChatPermission:
        with database_errors("create permission"):
            record = ChatPermissionModel(name=name)
            self._session.add(record)
            await self._session.flush()
        return permission_to_entity(record)

    async def delete(self, permission_id: int) -> bool:
        with database_errors("delete permission"):
            record = await self._session.get(ChatPermissionModel, permission_id)
            if record is None:
                return False
            await self._session.execute(
                delete(chat_role_permissions).where(
                    chat_role_permissions.c.permission_id == permission_id
                )
            )
            await self._session.delete(record)
            await self._session.flush()
        return True
