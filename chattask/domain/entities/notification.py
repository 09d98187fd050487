"""
Notification Entities - Events handed to the notification dispatcher.

Every notification carries a generated id, its type, the recipient email and
a creation timestamp; the subclasses add the event-specific fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from chattask.domain.value_objects.notification_type import NotificationType


@dataclass
class Notification:
    id: str
    type: NotificationType
    email: str
    created_at: datetime


@dataclass
class NewChatNotification(Notification):
    chat_id: str
    chat_name: str
    creator_name: str
    is_group: bool
    description: Optional[str] = None

    @classmethod
    def create(
        cls,
        email: str,
        chat_id: str,
        chat_name: str,
        creator_name: str,
        is_group: bool,
        description: Optional[str] = None,
    ) -> NewChatNotification:
        return cls(
            id=str(uuid4()),
            type=NotificationType.NEW_CHAT,
            email=email,
            created_at=datetime.now(timezone.utc),
            chat_id=chat_id,
            chat_name=chat_name,
            creator_name=creator_name,
            is_group=is_group,
            description=description,
        )


@dataclass
class NewTaskNotification(Notification):
    task_id: int
    task_title: str
    creator_name: str
    executor_id: str

    @classmethod
    def create(
        cls,
        email: str,
        task_id: int,
        task_title: str,
        creator_name: str,
        executor_id: str,
    ) -> NewTaskNotification:
        return cls(
            id=str(uuid4()),
            type=NotificationType.NEW_TASK,
            email=email,
            created_at=datetime.now(timezone.utc),
            task_id=task_id,
            task_title=task_title,
            creator_name=creator_name,
            executor_id=executor_id,
        )
