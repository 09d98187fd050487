"""
GetChatMessages Query - A page of chat messages, newest first, with files.

Every attached file is resolved through the file service; a single failure
aborts the whole page.
"""

from dataclasses import dataclass, field

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.message import Message
from chattask.domain.exceptions import ChatNotFoundError
from chattask.domain.ports.gateways import FileGateway, FileInfo
from chattask.domain.ports.repositories import ChatRepository, MessageRepository
from chattask.domain.value_objects.chat_id import ChatId
from chattask.config.settings import Config


@dataclass
class MessageWithFiles:
    message: Message
    files: list[FileInfo] = field(default_factory=list)


@dataclass(frozen=True)
class GetChatMessagesQuery(Query[list[MessageWithFiles]]):
    chat_id: ChatId
    offset: int = 0
    limit: int = Config.MESSAGES_DEFAULT_LIMIT


class GetChatMessagesHandler(QueryHandler[list[MessageWithFiles]]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        file_gateway: FileGateway,
    ):
        self._chat_repository = chat_repository
        self._message_repository = message_repository
        self._file_gateway = file_gateway

    async def execute(self, query: GetChatMessagesQuery) -> list[MessageWithFiles]:
        """
        Raises:
            ChatNotFoundError: the chat does not exist
            FileServiceError: an attached file could not be resolved
        """
        if await self._chat_repository.get_by_id(query.chat_id) is None:
            raise ChatNotFoundError(query.chat_id.value)

        messages = await self._message_repository.list_by_chat(
            query.chat_id, limit=query.limit, offset=query.offset
        )

        page = []
        for message in messages:
            files = [await self._file_gateway.get_file(file_id) for file_id in message.file_ids]
            page.append(MessageWithFiles(message=message, files=files))
        return page
