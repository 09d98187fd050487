"""Membership and role lookups inside a chat."""

from dataclasses import dataclass

from chattask.application.common.interfaces import Query, QueryHandler
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.entities.chat_role import ChatRole
from chattask.domain.exceptions import NotChatMemberError, UserNotInChatError
from chattask.domain.ports.repositories import ChatMemberRepository
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


def _role_of(member: ChatMember) -> ChatRole:
    return member.role or ChatRole(id=member.role_id, name="")


@dataclass(frozen=True)
class GetUserRoleQuery(Query[ChatRole]):
    chat_id: ChatId
    user_id: UserId
    requester_id: UserId


class GetUserRoleHandler(QueryHandler[ChatRole]):
    def __init__(self, member_repository: ChatMemberRepository):
        self._member_repository = member_repository

    async def execute(self, query: GetUserRoleQuery) -> ChatRole:
        """
        Raises:
            NotChatMemberError: the requester is not a member of the chat
            UserNotInChatError: the target user is not a member of the chat
        """
        if await self._member_repository.get(query.chat_id, query.requester_id) is None:
            raise NotChatMemberError("requester is not a member of this chat")

        member = await self._member_repository.get(query.chat_id, query.user_id)
        if member is None:
            raise UserNotInChatError()
        return _role_of(member)


@dataclass(frozen=True)
class GetMyRoleQuery(Query[ChatRole]):
    chat_id: ChatId
    user_id: UserId


class GetMyRoleHandler(QueryHandler[ChatRole]):
    def __init__(self, member_repository: ChatMemberRepository):
        self._member_repository = member_repository

    async def execute(self, query: GetMyRoleQuery) -> ChatRole:
        member = await self._member_repository.get(query.chat_id, query.user_id)
        if member is None:
            raise UserNotInChatError()
        return _role_of(member)


@dataclass(frozen=True)
class ListChatMembersQuery(Query[list[ChatMember]]):
    chat_id: ChatId


class ListChatMembersHandler(QueryHandler[list[ChatMember]]):
    def __init__(self, member_repository: ChatMemberRepository):
        self._member_repository = member_repository

    async def execute(self, query: ListChatMembersQuery) -> list[ChatMember]:
        return await self._member_repository.list_by_chat(query.chat_id)
