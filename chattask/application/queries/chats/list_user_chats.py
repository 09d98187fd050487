"""ListUserChats Query - Chats the user is a member of."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.chat import Chat
from chattask.domain.ports.repositories import ChatRepository
from chattask.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListUserChatsQuery(Query[list[Chat]]):
    user_id: UserId


class ListUserChatsHandler(QueryHandler[list[Chat]]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, query: ListUserChatsQuery) -> list[Chat]:
        return await self._chat_repository.list_by_member(query.user_id)
