"""
Unit of Work Port - Transaction boundary of one operation.
Implementation: chattask/infrastructure/persistence/unit_of_work.py

Repositories stage writes on the shared session; nothing is durable until
commit(). Handlers call rollback() when any step of a multi-write operation
fails, so partial writes are never visible.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...
