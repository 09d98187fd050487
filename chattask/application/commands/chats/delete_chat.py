"""Delete Chat Command - removes memberships, messages and the chat together."""

import logging
from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.exceptions import ChatNotFoundError
from chattask.domain.ports.repositories import (
    ChatMemberRepository,
    ChatRepository,
    MessageRepository,
)
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteChatCommand(Command[None]):
    chat_id: ChatId


class DeleteChatHandler(CommandHandler[None]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        message_repository: MessageRepository,
        unit_of_work: UnitOfWork,
    ):
        self._chat_repository = chat_repository
        self._member_repository = member_repository
        self._message_repository = message_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteChatCommand) -> None:
        if await self._chat_repository.get_by_id(command.chat_id) is None:
            raise ChatNotFoundError(command.chat_id.value)

        try:
            await self._member_repository.remove_all(command.chat_id)
            await self._message_repository.delete_by_chat(command.chat_id)
            await self._chat_repository.delete(command.chat_id)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(f"[DeleteChat] Chat {command.chat_id.value} deleted")
