"""
Create Task Command.

Steps:
1. Resolve the initial status "created"
2. Validate the creator, the optional executor (keeping its email) and the
   optional chat through the external services
3. Validate every attached file
4. Persist the task with its file rows in one unit of work
5. Notify the executor (best effort)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chattask.application.common.file_references import resolve_files
from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.task import Task
from chattask.domain.exceptions import TaskStatusNotFoundError
from chattask.domain.ports.gateways import ChatGateway, FileGateway, UserGateway
from chattask.domain.ports.repositories import TaskRepository, TaskStatusRepository
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId
from chattask.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

INITIAL_STATUS = "created"


@dataclass(frozen=True)
class CreateTaskCommand(Command[Task]):
    title: str
    creator_id: UserId
    description: Optional[str] = None
    executor_id: Optional[UserId] = None
    chat_id: Optional[ChatId] = None
    file_ids: tuple[int, ...] = ()


class CreateTaskHandler(CommandHandler[Task]):
    def __init__(
        self,
        task_repository: TaskRepository,
        status_repository: TaskStatusRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        chat_gateway: ChatGateway,
        unit_of_work: UnitOfWork,
        notification_service: NotificationService,
    ):
        self._task_repository = task_repository
        self._status_repository = status_repository
        self._user_gateway = user_gateway
        self._file_gateway = file_gateway
        self._chat_gateway = chat_gateway
        self._unit_of_work = unit_of_work
        self._notification_service = notification_service

    async def execute(self, command: CreateTaskCommand) -> Task:
        """
        Raises:
            TaskStatusNotFoundError: the "created" status is not configured
            UserServiceError: creator or executor could not be resolved
            ChatServiceError: the chat could not be resolved
            FileServiceError / FileReferenceNotFoundError: bad file reference
            DatabaseError: a write failed
        """
        status = await self._status_repository.get_by_name(INITIAL_STATUS)
        if status is None:
            raise TaskStatusNotFoundError(INITIAL_STATUS)

        creator = await self._user_gateway.get_user(command.creator_id)

        executor_email: Optional[str] = None
        if command.executor_id is not None:
            executor = await self._user_gateway.get_user(command.executor_id)
            executor_email = executor.email

        if command.chat_id is not None:
            await self._chat_gateway.get_chat(command.chat_id)

        files = await resolve_files(self._file_gateway, command.file_ids)

        task = Task.create(
            title=command.title,
            status=status,
            creator_id=command.creator_id,
            description=command.description,
            executor_id=command.executor_id,
            chat_id=command.chat_id,
            file_ids=[file.id for file in files],
        )
        try:
            task = await self._task_repository.add(task)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(f"[CreateTask] Task {task.id} created by {command.creator_id.value}")

        await self._notification_service.send_task_created(
            executor_email, task, creator.username
        )
        return task
