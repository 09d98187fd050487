"""
Task Repository Port.
Implementation: chattask/infrastructure/persistence/sqlalchemy_task_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chattask.domain.entities.task import Task
from chattask.domain.value_objects.user_id import UserId


class TaskRepository(ABC):
    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[Task]: ...

    @abstractmethod
    async def list_by_executor(
        self, executor_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Task]: ...

    @abstractmethod
    async def add(self, task: Task) -> Task:
        """Persist the task and its file rows; returns the task with its id assigned."""
        ...

    @abstractmethod
    async def update_status(self, task_id: int, status_id: int) -> None: ...
