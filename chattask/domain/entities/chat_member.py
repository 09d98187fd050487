"""
ChatMember Entity - Membership of a user in a chat (the chat_user row).

Keyed by (chat_id, user_id). The role is loaded alongside the membership
when the caller needs to evaluate permissions.
"""

from dataclasses import dataclass
from typing import Optional
from chattask.domain.entities.chat_role import ChatRole
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


@dataclass
class ChatMember:
    chat_id: ChatId
    user_id: UserId
    role_id: int
    role: Optional[ChatRole] = None
