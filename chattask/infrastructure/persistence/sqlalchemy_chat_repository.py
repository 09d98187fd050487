"""
SQLAlchemy Chat Repository Implementation.

Repositories stage changes and flush; the unit of work owns commit/rollback.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.chat import Chat
from chattask.domain.exceptions import ChatNotFoundError
from chattask.domain.ports.repositories.chat_repository import ChatRepository
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import chat_to_entity
from chattask.infrastructure.persistence.models import ChatModel, ChatUserModel

logger = logging.getLogger(__name__)


class SqlAlchemyChatRepository(ChatRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, chat_id: ChatId) -> Optional[Chat]:
        with database_errors("load chat"):
            record = await self._session.get(ChatModel, chat_id.value)
        return chat_to_entity(record) if record else None

    async def list_by_member(self, user_id: UserId) -> list[Chat]:
        stmt = (
            select(ChatModel)
            .join(ChatUserModel, ChatUserModel.chat_id == ChatModel.id)
            .where(ChatUserModel.user_id == user_id.value)
            .order_by(ChatModel.created_at.desc())
        )
        with database_errors("list chats"):
            records = (await self._session.scalars(stmt)).all()
        return [chat_to_entity(record) for record in records]

    async def add(self, chat: Chat) -> None:
        with database_errors("create chat"):
            self._session.add(
                ChatModel(
                    id=chat.id.value,
                    name=chat.name,
                    is_group=chat.is_group,
                    description=chat.description,
                    avatar_file_id=chat.avatar_file_id,
                    created_at=chat.created_at,
                )
            )
            await self._session.flush()

    async def update(self, chat: Chat) -> None:
        with database_errors("update chat"):
            record = await self._session.get(ChatModel, chat.id.value)
            if record is None:
                raise ChatNotFoundError(chat.id.value)
            record.name = chat.name
            record.description = chat.description
            record.avatar_file_id = chat.avatar_file_id
            await self._session.flush()

    async def delete(self, chat_id: ChatId) -> None:
        with database_errors("delete chat"):
            await self._session.execute(delete(ChatModel).where(ChatModel.id == chat_id.value))
