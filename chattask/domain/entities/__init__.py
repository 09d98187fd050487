"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chattask.domain.entities.chat import Chat
from chattask.domain.entities.chat_role import ChatRole, ChatPermission
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.entities.message import Message
from chattask.domain.entities.task import Task, TaskStatus
from chattask.domain.entities.notification import (
    Notification,
    NewChatNotification,
    NewTaskNotification,
)

__all__ = [
    "Chat",
    "ChatRole",
    "ChatPermission",
    "ChatMember",
    "Message",
    "Task",
    "TaskStatus",
    "Notification",
    "NewChatNotification",
    "NewTaskNotification",
]
