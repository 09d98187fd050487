"""
Async SQLAlchemy engine/session setup.

- One engine per process (app scope), one AsyncSession per request
- expire_on_commit=False: entities are mapped after commit without lazy IO
- Tables are created on startup; seeding lives in seed.py
"""

import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from chattask.config.settings import Config
from chattask.domain.exceptions import DatabaseError
from chattask.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


def create_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    url = url or Config.DATABASE_URL
    kwargs = {"echo": Config.DATABASE_ECHO if echo is None else echo}
    if url.startswith("sqlite") and ":memory:" in url:
        # A single shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    engine = create_async_engine(url, **kwargs)
    logger.info(f"[Database] Engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[Database] Tables created")


@contextmanager
def database_errors(action: str):
    """Translate SQLAlchemy failures into the domain DatabaseError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"[Database] Failed to {action}: {e}")
        raise DatabaseError(f"failed to {action}") from e
