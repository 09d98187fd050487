"""
Messaging - notification publishers.

KafkaNotificationPublisher sends to the notifications topic through aiokafka;
LoggingNotificationPublisher only logs and is used when Kafka is disabled.
create_notification_publisher picks one from the configuration.
"""

from chattask.infrastructure.messaging.kafka_publisher import (
    KafkaNotificationPublisher,
    create_kafka_producer,
    close_kafka_producer,
    serialize_notification,
)
from chattask.infrastructure.messaging.logging_publisher import (
    LoggingNotificationPublisher,
)
from chattask.infrastructure.messaging.factory import create_notification_publisher

__all__ = [
    "KafkaNotificationPublisher",
    "create_kafka_producer",
    "close_kafka_producer",
    "serialize_notification",
    "LoggingNotificationPublisher",
    "create_notification_publisher",
]
