"""Repository ports."""

from chattask.domain.ports.repositories.chat_repository import ChatRepository
from chattask.domain.ports.repositories.chat_member_repository import (
    ChatMemberRepository,
)
from chattask.domain.ports.repositories.chat_role_repository import ChatRoleRepository
from chattask.domain.ports.repositories.chat_permission_repository import (
    ChatPermissionRepository,
)
from chattask.domain.ports.repositories.message_repository import MessageRepository
from chattask.domain.ports.repositories.task_repository import TaskRepository
from chattask.domain.ports.repositories.task_status_repository import (
    TaskStatusRepository,
)

__all__ = [
    "ChatRepository",
    "ChatMemberRepository",
    "ChatRoleRepository",
    "ChatPermissionRepository",
    "MessageRepository",
    "TaskRepository",
    "TaskStatusRepository",
]
