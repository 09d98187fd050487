"""
Chat Gateway Port - Lets the task side verify chats over HTTP.
Implementation: chattask/infrastructure/http_clients/chat_client.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from chattask.domain.value_objects.chat_id import ChatId


@dataclass(frozen=True)
class ChatInfo:
    id: str
    name: str
    is_group: bool = False


class ChatGateway(ABC):
    @abstractmethod
    async def get_chat(self, chat_id: ChatId) -> ChatInfo:
        """
        Raises:
            ChatServiceError: transport failure or non-200 answer
        """
        ...
