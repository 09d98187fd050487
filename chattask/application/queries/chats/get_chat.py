"""
GetChat Query - Chat details with its avatar file.

This is also what the task side's chat gateway calls to verify a chat.
The avatar is resolved best effort: a file service failure leaves it out.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.chat import Chat
from chattask.domain.exceptions import ChatNotFoundError, GatewayError
from chattask.domain.ports.gateways import FileGateway, FileInfo
from chattask.domain.ports.repositories import ChatRepository
from chattask.domain.value_objects.chat_id import ChatId

logger = logging.getLogger(__name__)


@dataclass
class GetChatResult:
    chat: Chat
    avatar: Optional[FileInfo] = None


@dataclass(frozen=True)
class GetChatQuery(Query[GetChatResult]):
    chat_id: ChatId


class GetChatHandler(QueryHandler[GetChatResult]):
    def __init__(self, chat_repository: ChatRepository, file_gateway: FileGateway):
        self._chat_repository = chat_repository
        self._file_gateway = file_gateway

    async def execute(self, query: GetChatQuery) -> GetChatResult:
        chat = await self._chat_repository.get_by_id(query.chat_id)
        if chat is None:
            raise ChatNotFoundError(query.chat_id.value)

        avatar = None
        if chat.avatar_file_id is not None:
            try:
                avatar = await self._file_gateway.get_file(chat.avatar_file_id)
            except GatewayError as e:
                logger.warning(f"[GetChat] Avatar of chat {chat.id.value} unavailable: {e}")

        return GetChatResult(chat=chat, avatar=avatar)
