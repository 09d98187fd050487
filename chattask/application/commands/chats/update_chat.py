"""
Update Chat Command.

Applies the supplied fields, then adds and removes members, all inside one
unit of work. Added members are notified after the commit.

An id in add_user_ids that is already a member is skipped: it is not
re-validated against the user service, gets no update_users entry and is not
notified. update_users therefore lists only memberships this call changed.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from chattask.application.common.file_references import resolve_file
from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.chat import Chat
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.exceptions import DatabaseError, InvalidCredentialsError
from chattask.domain.ports.gateways import FileGateway, UserGateway
from chattask.domain.ports.repositories import (
    ChatMemberRepository,
    ChatRepository,
    ChatRoleRepository,
)
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.system_role import SystemRole
from chattask.domain.value_objects.user_id import UserId
from chattask.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

MEMBER_CREATED = "created"
MEMBER_DELETED = "deleted"
ADMINISTRATOR = "Administrator"


@dataclass
class UpdatedMember:
    user_id: UserId
    state: str


@dataclass
class UpdateChatResult:
    chat: Chat
    update_users: list[UpdatedMember] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateChatCommand(Command[UpdateChatResult]):
    chat_id: ChatId
    name: Optional[str] = None
    description: Optional[str] = None
    avatar_file_id: Optional[int] = None
    add_user_ids: tuple[UserId, ...] = ()
    remove_user_ids: tuple[UserId, ...] = ()


class UpdateChatHandler(CommandHandler[UpdateChatResult]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        unit_of_work: UnitOfWork,
        notification_service: NotificationService,
    ):
        self._chat_repository = chat_repository
        self._member_repository = member_repository
        self._role_repository = role_repository
        self._user_gateway = user_gateway
        self._file_gateway = file_gateway
        self._unit_of_work = unit_of_work
        self._notification_service = notification_service

    async def execute(self, command: UpdateChatCommand) -> UpdateChatResult:
        """
        Raises:
            DatabaseError: the chat does not exist, or a write failed
            InvalidCredentialsError: system role "main" is missing
            FileServiceError / FileReferenceNotFoundError: bad avatar file
            UserServiceError: an added user could not be resolved
        """
        chat = await self._chat_repository.get_by_id(command.chat_id)
        if chat is None:
            # Reported like any other storage failure, not as a missing resource
            raise DatabaseError(f"chat not found: {command.chat_id.value}")

        if command.avatar_file_id is not None:
            await resolve_file(self._file_gateway, command.avatar_file_id)

        chat.apply_changes(
            name=command.name,
            description=command.description,
            avatar_file_id=command.avatar_file_id,
        )

        update_users: list[UpdatedMember] = []
        recipients: list[str] = []
        try:
            await self._chat_repository.update(chat)

            main_role = await self._role_repository.get_by_name(SystemRole.MAIN.value)
            if main_role is None:
                raise InvalidCredentialsError("system role 'main' must exist")

            for user_id in command.add_user_ids:
                if await self._member_repository.get(chat.id, user_id) is not None:
                    continue
                user = await self._user_gateway.get_user(user_id)
                await self._member_repository.add(
                    ChatMember(chat_id=chat.id, user_id=user_id, role_id=main_role.id)
                )
                update_users.append(UpdatedMember(user_id=user_id, state=MEMBER_CREATED))
                recipients.append(user.email)

            for user_id in command.remove_user_ids:
                await self._member_repository.remove(chat.id, user_id)
                update_users.append(UpdatedMember(user_id=user_id, state=MEMBER_DELETED))

            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(
            f"[UpdateChat] Chat {chat.id.value} updated: "
            f"{len(recipients)} added, {len(command.remove_user_ids)} removed"
        )

        for email in recipients:
            await self._notification_service.send_chat_created(email, chat, ADMINISTRATOR)

        return UpdateChatResult(chat=chat, update_users=update_users)
