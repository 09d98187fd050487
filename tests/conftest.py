import asyncio

import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from chattask.fastapi_app import create_fastapi_app
from chattask.setup.ioc.container import AppProvider
from fakes import FakeEnvironment, FakeInfrastructureProvider


@pytest.fixture()
def env():
    """Seeded in-memory store plus fake external services."""
    return FakeEnvironment.seeded()


@pytest.fixture()
def app(env):
    """Create a FastAPI app wired to the in-memory fakes."""
    container = make_async_container(FakeInfrastructureProvider(env), AppProvider())
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def run():
    """Run a coroutine to completion (handlers are async)."""
    return asyncio.run
