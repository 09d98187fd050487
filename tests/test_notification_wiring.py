"""Notification publisher as built by the application container."""

import asyncio

import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from chattask.config.settings import Config
from chattask.domain.ports.notification_publisher import NotificationPublisher
from chattask.fastapi_app import create_fastapi_app
from chattask.infrastructure.messaging import (
    KafkaNotificationPublisher,
    LoggingNotificationPublisher,
    create_notification_publisher,
)
from chattask.setup.ioc.container import AppProvider, InfrastructureProvider
from fakes import FakeInfrastructureProvider

UNREACHABLE_BROKER = "127.0.0.1:1"


@pytest.fixture()
def kafka_unreachable(monkeypatch):
    monkeypatch.setattr(Config, "KAFKA_ENABLED", True)
    monkeypatch.setattr(Config, "KAFKA_BROKERS", UNREACHABLE_BROKER)


def _resolve_publisher():
    async def main():
        container = make_async_container(InfrastructureProvider())
        try:
            return await container.get(NotificationPublisher)
        finally:
            await container.close()

    return asyncio.run(main())


def test_kafka_disabled_gives_logging_publisher(monkeypatch):
    monkeypatch.setattr(Config, "KAFKA_ENABLED", False)

    assert isinstance(_resolve_publisher(), LoggingNotificationPublisher)


def test_kafka_publisher_resolves_without_broker(kafka_unreachable):
    assert isinstance(_resolve_publisher(), KafkaNotificationPublisher)


def test_create_chat_succeeds_when_broker_is_unreachable(env, kafka_unreachable):
    env.publisher = create_notification_publisher()
    container = make_async_container(FakeInfrastructureProvider(env), AppProvider())
    owner, member = env.new_user("owner"), env.new_user("member")

    with TestClient(create_fastapi_app(container)) as client:
        res = client.post(
            "/chats",
            json={"name": "team", "ownerID": owner.value, "userIDs": [member.value]},
        )

    assert res.status_code == 201
    assert res.json()["chat_id"] in env.store.chats
