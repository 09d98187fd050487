"""Chat role and permission queries."""

from .chat_roles import (
    ListChatRolesQuery,
    ListChatRolesHandler,
    GetChatRoleQuery,
    GetChatRoleHandler,
    ListChatPermissionsQuery,
    ListChatPermissionsHandler,
)

__all__ = [
    "ListChatRolesQuery",
    "ListChatRolesHandler",
    "GetChatRoleQuery",
    "GetChatRoleHandler",
    "ListChatPermissionsQuery",
    "ListChatPermissionsHandler",
]
