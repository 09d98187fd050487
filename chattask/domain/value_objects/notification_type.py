"""NotificationType - Kinds of events published to the notification topic."""

from enum import Enum


class NotificationType(str, Enum):
    NEW_TASK = "new_task"
    NEW_CHAT = "new_chat"
