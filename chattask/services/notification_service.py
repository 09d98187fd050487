"""
Notification Service - Best-effort event dispatch.

Failures are logged and swallowed: a notification never changes the outcome
of the operation that triggered it. An empty recipient email skips the send.
"""

import logging
from typing import Optional

from chattask.domain.entities.chat import Chat
from chattask.domain.entities.notification import (
    NewChatNotification,
    NewTaskNotification,
)
from chattask.domain.entities.task import Task
from chattask.domain.ports.notification_publisher import NotificationPublisher

logger = logging.getLogger(__name__)

UNKNOWN_CREATOR = "Unknown user"


class NotificationService:
    def __init__(self, publisher: NotificationPublisher):
        self._publisher = publisher

    async def send_chat_created(
        self, email: Optional[str], chat: Chat, creator_name: Optional[str]
    ) -> bool:
        """Notify one member about a chat they were added to. Returns True if sent."""
        if not email:
            logger.debug(f"[Notifications] No email for chat {chat.id.value}, skipping")
            return False

        notification = NewChatNotification.create(
            email=email,
            chat_id=chat.id.value,
            chat_name=chat.name,
            creator_name=creator_name or UNKNOWN_CREATOR,
            is_group=chat.is_group,
            description=chat.description,
        )
        try:
            await self._publisher.publish(notification)
        except Exception as e:
            logger.error(
                f"[Notifications] Failed to send new_chat notification to {email}: {e}"
            )
            return False

        logger.info(f"[Notifications] new_chat notification sent to {email}")
        return True

    async def send_task_created(
        self, email: Optional[str], task: Task, creator_name: Optional[str]
    ) -> bool:
        """Notify the executor about a task assigned to them. Returns True if sent."""
        if not email or task.executor_id is None:
            logger.debug(f"[Notifications] No executor email for task {task.id}, skipping")
            return False

        notification = NewTaskNotification.create(
            email=email,
            task_id=task.id,
            task_title=task.title,
            creator_name=creator_name or UNKNOWN_CREATOR,
            executor_id=task.executor_id.value,
        )
        try:
            await self._publisher.publish(notification)
        except Exception as e:
            logger.error(
                f"[Notifications] Failed to send new_task notification to {email}: {e}"
            )
            return False

        logger.info(f"[Notifications] new_task notification sent to {email}")
        return True
