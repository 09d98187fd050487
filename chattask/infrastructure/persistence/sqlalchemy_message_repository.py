"""
SQLAlchemy Message Repository Implementation.

Messages are returned newest first. Search is a case-insensitive substring
match (ILIKE) scoped to one chat; LIKE wildcards in the search text are
escaped so they match literally.
"""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.entities.message import Message
from chattask.domain.ports.repositories.message_repository import MessageRepository
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.message_id import MessageId
from chattask.infrastructure.persistence.database import database_errors
from chattask.infrastructure.persistence.mappers import message_to_entity
from chattask.infrastructure.persistence.models import MessageFileModel, MessageModel


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlAlchemyMessageRepository(MessageRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        with database_errors("load message"):
            record = await self._session.get(MessageModel, message_id.value)
        return message_to_entity(record) if record else None

    async def list_by_chat(
        self, chat_id: ChatId, limit: int = 20, offset: int = 0
    ) -> list[Message]:
        stmt = (
            select(MessageModel)
            .where(MessageModel.chat_id == chat_id.value)
            .order_by(MessageModel.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        with database_errors("list messages"):
            records = (await self._session.scalars(stmt)).all()
        return [message_to_entity(record) for record in records]

    async def search(
        self, chat_id: ChatId, text: str, limit: int, offset: int
    ) -> tuple[list[Message], int]:
        conditions = (
            MessageModel.chat_id == chat_id.value,
            MessageModel.content.ilike(_like_pattern(text), escape="\\"),
        )
        with database_errors("search messages"):
            total = await self._session.scalar(
                select(func.count()).select_from(MessageModel).where(*conditions)
            )
            records = (
                await self._session.scalars(
                    select(MessageModel)
                    .where(*conditions)
                    .order_by(MessageModel.created_at.desc())
                    .limit(limit)
                    .offset(offset)
                )
            ).all()
        return [message_to_entity(record) for record in records], int(total or 0)

    async def add(self, message: Message) -> None:
        with database_errors("create message"):
            self._session.add(
                MessageModel(
                    id=message.id.value,
                    chat_id=message.chat_id.value,
                    sender_id=message.sender_id.value if message.sender_id else None,
                    content=message.content,
                    created_at=message.created_at,
                    updated_at=message.updated_at,
                    files=[MessageFileModel(file_id=file_id) for file_id in message.file_ids],
                )
            )
            await self._session.flush()

    async def delete_by_chat(self, chat_id: ChatId) -> None:
        message_ids = select(MessageModel.id).where(MessageModel.chat_id == chat_id.value)
        with database_errors("delete chat messages"):
            await self._session.execute(
                delete(MessageFileModel)
                .where(MessageFileModel.message_id.in_(message_ids))
                .execution_options(synchronize_session=False)
            )
            await self._session.execute(
                delete(MessageModel)
                .where(MessageModel.chat_id == chat_id.value)
                .execution_options(synchronize_session=False)
            )
