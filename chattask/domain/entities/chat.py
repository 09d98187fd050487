"""
Chat Entity - A conversation space with members.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from chattask.domain.value_objects.chat_id import ChatId


@dataclass
class Chat:
    id: ChatId
    name: str
    is_group: bool
    created_at: datetime
    description: Optional[str] = None
    avatar_file_id: Optional[int] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Chat name cannot be empty")

    @classmethod
    def create(
        cls,
        name: str,
        member_count: int,
        description: Optional[str] = None,
        avatar_file_id: Optional[int] = None,
    ) -> Chat:
        """Create a new chat; it is a group chat when more than one member is invited."""
        return cls(
            id=ChatId(str(uuid4())),
            name=name,
            is_group=member_count > 1,
            created_at=datetime.now(timezone.utc),
            description=description,
            avatar_file_id=avatar_file_id,
        )

    def apply_changes(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        avatar_file_id: Optional[int] = None,
    ) -> None:
        """Overwrite only the fields that were supplied."""
        if name is not None:
            if not name.strip():
                raise ValueError("Chat name cannot be empty")
            self.name = name
        if description is not None:
            self.description = description
        if avatar_file_id is not None:
            self.avatar_file_id = avatar_file_id
