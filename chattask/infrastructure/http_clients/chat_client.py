"""
Chat service gateway, used by the task side to verify chats.

GET {CHAT_SERVICE_URL}/chats/{id} answers the chat object.
"""

import httpx

from chattask.config.settings import Config
from chattask.domain.exceptions import ChatServiceError
from chattask.domain.ports.gateways.chat_gateway import ChatGateway, ChatInfo
from chattask.domain.value_objects.chat_id import ChatId
from chattask.infrastructure.http_clients.base_client import (
    GatewayCallError,
    get_json,
    pick,
)


class HttpChatGateway(ChatGateway):
    def __init__(self, client: httpx.AsyncClient, base_url: str = Config.CHAT_SERVICE_URL):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def get_chat(self, chat_id: ChatId) -> ChatInfo:
        url = f"{self._base_url}/chats/{chat_id.value}"
        try:
            data = await get_json(self._client, url, "chat")
        except GatewayCallError as e:
            raise ChatServiceError(chat_id.value, str(e)) from e

        if not isinstance(data, dict):
            raise ChatServiceError(chat_id.value, "unexpected chat response")

        return ChatInfo(
            id=str(pick(data, "id", "ID", default=chat_id.value)),
            name=pick(data, "name", "Name", default=""),
            is_group=bool(pick(data, "isGroup", "is_group", "IsGroup", default=False)),
        )
