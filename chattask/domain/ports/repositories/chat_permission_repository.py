"""
Chat Permission Repository Port.
Implementation: chattask/infrastructure/persistence/sqlalchemy_chat_role_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.chat_role import ChatPermission


class ChatPermissionRepository(ABC):
    @abstractmethod
    async def get_by_id(self, permission_id: int) -> Optional[ChatPermission]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[ChatPermission]: ...

    @abstractmethod
    async def list_all(self) -> list[ChatPermission]: ...

    @abstractmethod
    async def create(self, name: str) -> ChatPermission: ...

    @abstractmethod
    async def delete(self, permission_id: int) -> bool: ...
