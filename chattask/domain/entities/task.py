"""
Task / TaskStatus Entities.

A task id is assigned by storage, so a freshly created task has id None
until the repository persists it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


@dataclass
class TaskStatus:
    id: int
    name: str


@dataclass
class Task:
    id: Optional[int]
    title: str
    description: str
    status_id: int
    creator_id: UserId
    created_at: datetime
    executor_id: Optional[UserId] = None
    chat_id: Optional[ChatId] = None
    file_ids: list[int] = field(default_factory=list)
    status: Optional[TaskStatus] = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Task title cannot be empty")

    @classmethod
    def create(
        cls,
        title: str,
        status: TaskStatus,
        creator_id: UserId,
        description: Optional[str] = None,
        executor_id: Optional[UserId] = None,
        chat_id: Optional[ChatId] = None,
        file_ids: Optional[list[int]] = None,
    ) -> Task:
        return cls(
            id=None,
            title=title,
            description=description or "",
            status_id=status.id,
            creator_id=creator_id,
            created_at=datetime.now(timezone.utc),
            executor_id=executor_id,
            chat_id=chat_id,
            file_ids=list(file_ids or []),
            status=status,
        )
