"""Chat role / permission DTOs."""

from pydantic import BaseModel

from chattask.domain.entities.chat_role import ChatRole


class PermissionDTO(BaseModel):
    id: int
    name: str


class RoleDTO(BaseModel):
    id: int
    name: str
    permissions: list[PermissionDTO] = []

    @classmethod
    def from_entity(cls, role: ChatRole) -> "RoleDTO":
        return cls(
            id=role.id,
            name=role.name,
            permissions=[PermissionDTO(id=p.id, name=p.name) for p in role.permissions],
        )
