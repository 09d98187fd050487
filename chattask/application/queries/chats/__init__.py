"""Chat queries."""

from .get_chat import GetChatQuery, GetChatHandler, GetChatResult
from .list_user_chats import ListUserChatsQuery, ListUserChatsHandler
from .member_roles import (
    GetUserRoleQuery,
    GetUserRoleHandler,
    GetMyRoleQuery,
    GetMyRoleHandler,
    ListChatMembersQuery,
    ListChatMembersHandler,
)

__all__ = [
    "GetChatQuery",
    "GetChatHandler",
    "GetChatResult",
    "ListUserChatsQuery",
    "ListUserChatsHandler",
    "GetUserRoleQuery",
    "GetUserRoleHandler",
    "GetMyRoleQuery",
    "GetMyRoleHandler",
    "ListChatMembersQuery",
    "ListChatMembersHandler",
]
