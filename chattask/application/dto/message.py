"""Message DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from chattask.application.dto.file import FileDTO
from chattask.domain.entities.message import Message
from chattask.domain.ports.gateways import FileInfo


class MessageDTO(BaseModel):
    """A chat message; files are present only when they were resolved."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    chat_id: str = Field(alias="chatID")
    sender_id: Optional[str] = Field(default=None, alias="senderID")
    content: str
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    created_at: datetime = Field(alias="createdAt")
    files: Optional[list[FileDTO]] = None

    @classmethod
    def from_entity(
        cls, message: Message, files: Optional[list[FileInfo]] = None
    ) -> "MessageDTO":
        return cls(
            id=message.id.value,
            chat_id=message.chat_id.value,
            sender_id=message.sender_id.value if message.sender_id else None,
            content=message.content,
            updated_at=message.updated_at,
            created_at=message.created_at,
            files=[FileDTO.from_info(f) for f in files] if files else None,
        )


class SearchMessagesDTO(BaseModel):
    messages: list[MessageDTO]
    total: int
