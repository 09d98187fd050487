"""Chat commands."""

from .create_chat import CreateChatCommand, CreateChatHandler
from .update_chat import (
    UpdateChatCommand,
    UpdateChatHandler,
    UpdateChatResult,
    UpdatedMember,
)
from .delete_chat import DeleteChatCommand, DeleteChatHandler
from .change_user_role import ChangeUserRoleCommand, ChangeUserRoleHandler
from .ban_user import BanUserCommand, BanUserHandler

__all__ = [
    "CreateChatCommand",
    "CreateChatHandler",
    "UpdateChatCommand",
    "UpdateChatHandler",
    "UpdateChatResult",
    "UpdatedMember",
    "DeleteChatCommand",
    "DeleteChatHandler",
    "ChangeUserRoleCommand",
    "ChangeUserRoleHandler",
    "BanUserCommand",
    "BanUserHandler",
]
