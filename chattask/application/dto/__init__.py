"""
DTOs - Data Transfer Objects

Pydantic models for API output. Field names are snake_case in Python and
serialize with the camelCase keys clients of the chat service expect; task
and file payloads keep snake_case keys.

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from chattask.application.dto.file import FileDTO
from chattask.application.dto.chat import (
    ChatDTO,
    UpdateUserDTO,
    UpdateChatResponseDTO,
    UserRoleDTO,
    RoleWithPermissionsDTO,
    ChatMemberDTO,
)
from chattask.application.dto.message import MessageDTO, SearchMessagesDTO
from chattask.application.dto.role import PermissionDTO, RoleDTO
from chattask.application.dto.task import (
    TaskStatusDTO,
    TaskDTO,
    TaskResponseDTO,
    TaskListItemDTO,
)

__all__ = [
    "FileDTO",
    "ChatDTO",
    "UpdateUserDTO",
    "UpdateChatResponseDTO",
    "UserRoleDTO",
    "RoleWithPermissionsDTO",
    "ChatMemberDTO",
    "MessageDTO",
    "SearchMessagesDTO",
    "PermissionDTO",
    "RoleDTO",
    "TaskStatusDTO",
    "TaskDTO",
    "TaskResponseDTO",
    "TaskListItemDTO",
]
