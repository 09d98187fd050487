"""
Message Repository Port - Interface for message persistence.
Implementation: chattask/infrastructure/persistence/sqlalchemy_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.message import Message
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.message_id import MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def list_by_chat(
        self, chat_id: ChatId, limit: int = 20, offset: int = 0
    ) -> list[Message]:
        """Newest first."""
        ...

    @abstractmethod
    async def search(
        self, chat_id: ChatId, text: str, limit: int, offset: int
    ) -> tuple[list[Message], int]:
        """Case-insensitive substring match, newest first, with the total match count."""
        ...

    @abstractmethod
    async def add(self, message: Message) -> None:
        """Persist the message and one file reference row per file id."""
        ...

    @abstractmethod
    async def delete_by_chat(self, chat_id: ChatId) -> None: ...
