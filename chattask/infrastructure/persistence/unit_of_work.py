"""SQLAlchemy Unit of Work - commits or rolls back the request session."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.infrastructure.persistence.database import database_errors

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def commit(self) -> None:
        with database_errors("commit transaction"):
            await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
        logger.debug("[Database] Transaction rolled back")
