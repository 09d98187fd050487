"""
ChatRole / ChatPermission Entities - Global role and capability reference data.
"""

from dataclasses import dataclass, field


@dataclass
class ChatPermission:
    id: int
    name: str


@dataclass
class ChatRole:
    id: int
    name: str
    permissions: list[ChatPermission] = field(default_factory=list)

    def permission_names(self) -> set[str]:
        return {permission.name for permission in self.permissions}

    def grants(self, permission_name: str) -> bool:
        return permission_name in self.permission_names()
