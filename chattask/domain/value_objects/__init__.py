"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or enum)
- Validates itself on creation
"""

from chattask.domain.value_objects.user_id import UserId
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.message_id import MessageId
from chattask.domain.value_objects.system_role import SystemRole
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.notification_type import NotificationType

__all__ = [
    "UserId",
    "ChatId",
    "MessageId",
    "SystemRole",
    "ChatPermissionName",
    "NotificationType",
]
