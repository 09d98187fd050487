"""SQLAlchemy Chat Member Repository Implementation (chat_user rows)."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.exceptions import DatabaseError
from chattask.domain.ports.repositories.chat_member_repository import (
    ChatMemberRepository,
)
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import member_to_entity
from chattask.infrastructure.persistence.models import ChatRoleModel, ChatUserModel


class SqlAlchemyChatMemberRepository(ChatMemberRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, chat_id: ChatId, user_id: UserId) -> Optional[ChatMember]:
        with database_errors("load membership"):
            record = await self._session.get(ChatUserModel, (chat_id.value, user_id.value))
        return member_to_entity(record) if record else None

    async def list_by_chat(self, chat_id: ChatId) -> list[ChatMember]:
        stmt = (
            select(ChatUserModel)
            .where(ChatUserModel.chat_id == chat_id.value)
            .order_by(ChatUserModel.role_id, ChatUserModel.user_id)
        )
        with database_errors("list chat members"):
            records = (await self._session.scalars(stmt)).all()
        return [member_to_entity(record) for record in records]

    async def add(self, member: ChatMember) -> None:
        with database_errors("add chat member"):
            role = await self._session.get(ChatRoleModel, member.role_id)
            self._session.add(
                ChatUserModel(
                    chat_id=member.chat_id.value,
                    user_id=member.user_id.value,
                    role_id=member.role_id,
                    role=role,
                )
            )
            await self._session.flush()

    async def update_role(self, chat_id: ChatId, user_id: UserId, role_id: int) -> None:
        with database_errors("update member role"):
            record = await self._session.get(ChatUserModel, (chat_id.value, user_id.value))
            if record is None:
                raise DatabaseError(f"membership of {user_id.value} in {chat_id.value} not found")
            # Assign the relationship too, so the identity map never holds a stale role
            record.role = await self._session.get(ChatRoleModel, role_id)
            record.role_id = role_id
            await self._session.flush()

    async def remove(self, chat_id: ChatId, user_id: UserId) -> None:
        with database_errors("remove chat member"):
            await self._session.execute(
                delete(ChatUserModel).where(
                    ChatUserModel.chat_id == chat_id.value,
                    ChatUserModel.user_id == user_id.value,
                )
            )

    async def remove_all(self, chat_id: ChatId) -> None:
        with database_errors("remove chat members"):
            await self._session.execute(
                delete(ChatUserModel).where(ChatUserModel.chat_id == chat_id.value)
            )
