"""
ChatPermissionName - Capability tokens checked by the access guard.
"""

from enum import Enum


class ChatPermissionName(str, Enum):
    SEND_MESSAGE = "send_message"
    VIEW_MESSAGES = "view_messages"
    BAN_USER = "ban_user"
    EDIT_CHAT = "edit_chat"
    DELETE_CHAT = "delete_chat"
    CHANGE_ROLE = "change_role"
