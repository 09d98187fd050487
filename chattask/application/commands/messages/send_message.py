"""
Send Message Command.

Every referenced file is validated before anything is written, so a bad file
id never leaves a message row behind. The message and its file rows are
committed together and then read back.
"""

import logging
from dataclasses import dataclass, field

from chattask.application.common.file_references import resolve_files
from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.message import Message
from chattask.domain.exceptions import InvalidCredentialsError
from chattask.domain.ports.gateways import FileGateway, FileInfo, UserGateway
from chattask.domain.ports.repositories import ChatRepository, MessageRepository
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class SendMessageResult:
    message: Message
    files: list[FileInfo] = field(default_factory=list)


@dataclass(frozen=True)
class SendMessageCommand(Command[SendMessageResult]):
    sender_id: UserId
    chat_id: ChatId
    content: str
    file_ids: tuple[int, ...] = ()


class SendMessageHandler(CommandHandler[SendMessageResult]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        unit_of_work: UnitOfWork,
    ):
        self._chat_repository = chat_repository
        self._message_repository = message_repository
        self._user_gateway = user_gateway
        self._file_gateway = file_gateway
        self._unit_of_work = unit_of_work

    async def execute(self, command: SendMessageCommand) -> SendMessageResult:
        """
        Raises:
            InvalidCredentialsError: the chat does not exist
            UserServiceError: the sender could not be resolved
            FileServiceError: the file service failed for one of the files
            FileReferenceNotFoundError: one of the files does not exist
            DatabaseError: a write failed
        """
        chat = await self._chat_repository.get_by_id(command.chat_id)
        if chat is None:
            raise InvalidCredentialsError(f"chat {command.chat_id.value} does not exist")

        await self._user_gateway.get_user(command.sender_id)
        files = await resolve_files(self._file_gateway, command.file_ids)

        message = Message.create(
            chat_id=command.chat_id,
            sender_id=command.sender_id,
            content=command.content,
            file_ids=[file.id for file in files],
        )
        try:
            await self._message_repository.add(message)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        stored = await self._message_repository.get_by_id(message.id)
        logger.info(
            f"[SendMessage] Message {message.id.value} sent to chat {command.chat_id.value} "
            f"with {len(files)} file(s)"
        )
        return SendMessageResult(message=stored or message, files=files)
