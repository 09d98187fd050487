"""
Task Status Repository Port.
Implementation: chattask/infrastructure/persistence/sqlalchemy_task_status_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.task import TaskStatus


class TaskStatusRepository(ABC):
    @abstractmethod
    async def get_by_id(self, status_id: int) -> Optional[TaskStatus]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[TaskStatus]: ...

    @abstractmethod
    async def list_all(self) -> list[TaskStatus]: ...

    @abstractmethod
    async def create(self, name: str) -> TaskStatus: ...

    @abstractmethod
    async def delete(self, status_id: int) -> bool: ...
