"""
Chat Repository Port - Interface for chat persistence.
Implementation: chattask/infrastructure/persistence/sqlalchemy_chat_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.chat import Chat
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


class ChatRepository(ABC):
    @abstractmethod
    async def get_by_id(self, chat_id: ChatId) -> Optional[Chat]: ...

    @abstractmethod
    async def list_by_member(self, user_id: UserId) -> list[Chat]: ...

    @abstractmethod
    async def add(self, chat: Chat) -> None: ...

    @abstractmethod
    async def update(self, chat: Chat) -> None: ...

    @abstractmethod
    async def delete(self, chat_id: ChatId) -> None: ...
