"""Chat role and permission administration commands."""

from .manage_roles import (
    CreateChatRoleCommand,
    CreateChatRoleHandler,
    DeleteChatRoleCommand,
    DeleteChatRoleHandler,
    UpdateRolePermissionsCommand,
    UpdateRolePermissionsHandler,
)
from .manage_permissions import (
    CreateChatPermissionCommand,
    CreateChatPermissionHandler,
    DeleteChatPermissionCommand,
    DeleteChatPermissionHandler,
)

__all__ = [
    "CreateChatRoleCommand",
    "CreateChatRoleHandler",
    "DeleteChatRoleCommand",
    "DeleteChatRoleHandler",
    "UpdateRolePermissionsCommand",
    "UpdateRolePermissionsHandler",
    "CreateChatPermissionCommand",
    "CreateChatPermissionHandler",
    "DeleteChatPermissionCommand",
    "DeleteChatPermissionHandler",
]
