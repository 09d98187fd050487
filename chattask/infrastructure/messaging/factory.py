"""Choose the notification publisher from the configuration."""

import logging

from chattask.config.settings import Config
from chattask.domain.ports.notification_publisher import NotificationPublisher
from chattask.infrastructure.messaging.kafka_publisher import (
    KafkaNotificationPublisher,
    create_kafka_producer,
)
from chattask.infrastructure.messaging.logging_publisher import (
    LoggingNotificationPublisher,
)

logger = logging.getLogger(__name__)


def create_notification_publisher() -> NotificationPublisher:
    """Kafka publisher when KAFKA_ENABLED, otherwise one that only logs. No I/O here."""
    if not Config.KAFKA_ENABLED:
        logger.info("[Notifications] Kafka disabled, notifications are only logged")
        return LoggingNotificationPublisher()

    logger.info(
        f"[Notifications] Publishing to Kafka topic {Config.KAFKA_NOTIFICATIONS_TOPIC} "
        f"on {Config.KAFKA_BROKERS}"
    )
    return KafkaNotificationPublisher(create_kafka_producer, Config.KAFKA_NOTIFICATIONS_TOPIC)
