"""
Notification Publisher Port - Hands notifications to the delivery channel.
Implementations: chattask/infrastructure/messaging/
"""

from abc import ABC, abstractmethod
from chattask.domain.entities.notification import Notification


class NotificationPublisher(ABC):
    @abstractmethod
    async def publish(self, notification: Notification) -> None: ...

    async def close(self) -> None:
        """Release the delivery channel; called once on shutdown."""
