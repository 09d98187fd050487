"""
Message Entity - A single message in a chat.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.message_id import MessageId
from chattask.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    chat_id: ChatId
    sender_id: Optional[UserId]
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    file_ids: list[int] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        chat_id: ChatId,
        sender_id: Optional[UserId],
        content: str,
        file_ids: Optional[list[int]] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            chat_id=chat_id,
            sender_id=sender_id,
            content=content,
            created_at=datetime.now(timezone.utc),
            file_ids=list(file_ids or []),
        )
