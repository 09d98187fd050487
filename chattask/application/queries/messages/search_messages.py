"""
SearchMessages Query - Case-insensitive substring search inside one chat.

The query text is checked before any storage access; the chat must exist and
the caller must be a member of it.
"""

from dataclasses import dataclass, field

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.message import Message
from chattask.domain.exceptions import (
    ChatNotFoundError,
    EmptyQueryError,
    NotChatMemberError,
)
from chattask.domain.ports.repositories import (
    ChatMemberRepository,
    ChatRepository,
    MessageRepository,
)
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


@dataclass
class SearchMessagesResult:
    messages: list[Message] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class SearchMessagesQuery(Query[SearchMessagesResult]):
    user_id: UserId
    chat_id: ChatId
    text: str
    limit: int = 20
    offset: int = 0


class SearchMessagesHandler(QueryHandler[SearchMessagesResult]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        message_repository: MessageRepository,
    ):
        self._chat_repository = chat_repository
        self._member_repository = member_repository
        self._message_repository = message_repository

    async def execute(self, query: SearchMessagesQuery) -> SearchMessagesResult:
        """
        Raises:
            EmptyQueryError: the search text is empty
            ChatNotFoundError: the chat does not exist
            NotChatMemberError: the caller is not a member of the chat
        """
        if not query.text:
            raise EmptyQueryError()

        if await self._chat_repository.get_by_id(query.chat_id) is None:
            raise ChatNotFoundError(query.chat_id.value)

        if await self._member_repository.get(query.chat_id, query.user_id) is None:
            raise NotChatMemberError()

        messages, total = await self._message_repository.search(
            query.chat_id, query.text, limit=query.limit, offset=query.offset
        )
        return SearchMessagesResult(messages=messages, total=total)
