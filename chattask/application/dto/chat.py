"""Chat DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from chattask.application.dto.file import FileDTO
from chattask.application.dto.role import PermissionDTO
from chattask.domain.entities.chat import Chat
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.entities.chat_role import ChatRole


class ChatDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    is_group: bool = Field(alias="isGroup")
    description: Optional[str] = None
    avatar_file_id: Optional[int] = Field(default=None, alias="avatarFileID")
    created_at: datetime = Field(alias="createdAt")
    avatar: Optional[FileDTO] = None

    @classmethod
    def from_entity(cls, chat: Chat, avatar: Optional[FileDTO] = None) -> "ChatDTO":
        return cls(
            id=chat.id.value,
            name=chat.name,
            is_group=chat.is_group,
            description=chat.description,
            avatar_file_id=chat.avatar_file_id,
            created_at=chat.created_at,
            avatar=avatar,
        )


class UpdateUserDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userID")
    state: str


class UpdateChatResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chat: ChatDTO
    update_users: list[UpdateUserDTO] = Field(default_factory=list, alias="updateUsers")


class UserRoleDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role_name: str = Field(alias="roleName")


class RoleWithPermissionsDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role_id: int = Field(alias="roleId")
    role_name: str = Field(alias="roleName")
    permissions: list[PermissionDTO] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, role: ChatRole) -> "RoleWithPermissionsDTO":
        return cls(
            role_id=role.id,
            role_name=role.name,
            permissions=[PermissionDTO(id=p.id, name=p.name) for p in role.permissions],
        )


class ChatMemberDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    role_id: int = Field(alias="roleId")
    role_name: str = Field(alias="roleName")

    @classmethod
    def from_entity(cls, member: ChatMember) -> "ChatMemberDTO":
        return cls(
            user_id=member.user_id.value,
            role_id=member.role_id,
            role_name=member.role.name if member.role else "",
        )
