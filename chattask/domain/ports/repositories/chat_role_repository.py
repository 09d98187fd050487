"""
Chat Role Repository Port.
Implementation: chattask/infrastructure/persistence/sqlalchemy_chat_role_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.chat_role import ChatRole


class ChatRoleRepository(ABC):
    @abstractmethod
    async def get_by_id(self, role_id: int) -> Optional[ChatRole]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[ChatRole]: ...

    @abstractmethod
    async def list_all(self) -> list[ChatRole]: ...

    @abstractmethod
    async def create(self, name: str, permission_ids: list[int]) -> ChatRole: ...

    @abstractmethod
    async def set_permissions(self, role_id: int, permission_ids: list[int]) -> ChatRole: ...

    @abstractmethod
    async def delete(self, role_id: int) -> bool: ...
