"""
User Gateway Port - Resolves user ids against the user service.
Implementation: chattask/infrastructure/http_clients/user_client.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from chattask.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserInfo:
    id: str
    username: str
    email: str


class UserGateway(ABC):
    @abstractmethod
    async def get_user(self, user_id: UserId) -> UserInfo:
        """
        Raises:
            UserServiceError: transport failure, non-200 answer or missing user
        """
        ...
