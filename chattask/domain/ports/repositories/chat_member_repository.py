"""
Chat Member Repository Port - Interface for chat_user membership rows.
Implementation: chattask/infrastructure/persistence/sqlalchemy_chat_member_repository.py

get() returns None when the user has no membership; a failing lookup raises
DatabaseError. Callers decide how absence maps to an error.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


class ChatMemberRepository(ABC):
    @abstractmethod
    async def get(self, chat_id: ChatId, user_id: UserId) -> Optional[ChatMember]:
        """Membership with its role and the role's permissions loaded."""
        ...

    @abstractmethod
    async def list_by_chat(self, chat_id: ChatId) -> list[ChatMember]: ...

    @abstractmethod
    async def add(self, member: ChatMember) -> None: ...

    @abstractmethod
    async def update_role(self, chat_id: ChatId, user_id: UserId, role_id: int) -> None: ...

    @abstractmethod
    async def remove(self, chat_id: ChatId, user_id: UserId) -> None: ...

    @abstractmethod
    async def remove_all(self, chat_id: ChatId) -> None: ...
