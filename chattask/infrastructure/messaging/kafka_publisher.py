"""
Kafka notification publisher (aiokafka).

Message value: {"type": "<notification type>", "payload": {...notification fields}}
encoded as UTF-8 JSON; the key is the recipient email so one recipient's
events keep their order within a partition.

The producer is started on the first publish, not when the publisher is
built. An unreachable broker therefore fails that publish, which callers
treat as best-effort, and the next publish tries to connect again.
"""

import asyncio
import dataclasses
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaError

from chattask.config.settings import Config
from chattask.domain.entities.notification import Notification
from chattask.domain.ports.notification_publisher import NotificationPublisher

logger = logging.getLogger(__name__)

ProducerFactory = Callable[[], Awaitable[AIOKafkaProducer]]


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_notification(notification: Notification) -> bytes:
    payload = dataclasses.asdict(notification)
    message = {"type": notification.type.value, "payload": payload}
    return json.dumps(message, default=_json_default).encode("utf-8")


async def create_kafka_producer() -> AIOKafkaProducer:
    """
    Create and start the producer.

    Raises:
        aiokafka.errors.KafkaConnectionError: If no broker is reachable
    """
    producer = AIOKafkaProducer(
        bootstrap_servers=Config.KAFKA_BROKERS.split(","),
        client_id=Config.KAFKA_CLIENT_ID,
    )
    try:
        await producer.start()
    except KafkaError:
        await producer.stop()
        raise
    logger.info(f"[Kafka] Producer connected to {Config.KAFKA_BROKERS}")
    return producer


async def close_kafka_producer(producer: Optional[AIOKafkaProducer]) -> None:
    if producer:
        await producer.stop()
        logger.info("[Kafka] Producer stopped")


class KafkaNotificationPublisher(NotificationPublisher):
    def __init__(
        self,
        producer_factory: ProducerFactory = create_kafka_producer,
        topic: str = Config.KAFKA_NOTIFICATIONS_TOPIC,
    ):
        self._producer_factory = producer_factory
        self._producer: Optional[AIOKafkaProducer] = None
        self._lock = asyncio.Lock()
        self._topic = topic

    async def _get_producer(self) -> AIOKafkaProducer:
        async with self._lock:
            if self._producer is None:
                self._producer = await self._producer_factory()
            return self._producer

    async def publish(self, notification: Notification) -> None:
        """
        Raises:
            aiokafka.errors.KafkaError: broker unreachable or send failed
        """
        producer = await self._get_producer()
        await producer.send_and_wait(
            self._topic,
            value=serialize_notification(notification),
            key=notification.email.encode("utf-8"),
        )
        logger.debug(
            f"[Kafka] {notification.type.value} notification {notification.id} "
            f"published to {self._topic}"
        )

    async def close(self) -> None:
        async with self._lock:
            producer, self._producer = self._producer, None
        await close_kafka_producer(producer)
