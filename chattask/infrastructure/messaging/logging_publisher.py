"""Notification publisher that only logs (Kafka disabled)."""

import logging

from chattask.domain.entities.notification import Notification
from chattask.domain.ports.notification_publisher import NotificationPublisher

logger = logging.getLogger(__name__)


class LoggingNotificationPublisher(NotificationPublisher):
    async def publish(self, notification: Notification) -> None:
        logger.info(
            f"[Notifications] {notification.type.value} for {notification.email} "
            f"(id={notification.id}) not sent: Kafka is disabled"
        )
