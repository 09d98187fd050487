"""
Create Chat Command.

Steps (fail-fast, in this order):
1. Resolve the system roles "owner" and "main"
2. Validate the avatar file through the file service
3. Build the chat; it is a group chat when more than one member is invited
4. Validate the owner through the user service
5. Stage the chat, the owner membership and one "main" membership per member
6. Commit; any failure in 5 rolls everything back
7. Notify every added member that has an email (best effort)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chattask.application.common.file_references import resolve_file
from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.entities.chat import Chat
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.exceptions import InvalidCredentialsError
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


@dataclass(frozen=True)
class CreateChatCommand(Command[ChatId]):
    name: str
    owner_id: UserId
    member_ids: tuple[UserId, ...] = ()
    description: Optional[str] = None
    avatar_file_id: Optional[int] = None


class CreateChatHandler(CommandHandler[ChatId]):
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

    async def execute(self, command: CreateChatCommand) -> ChatId:
        """
        Raises:
            InvalidCredentialsError: system role "owner" or "main" is missing
            FileServiceError: the file service could not resolve the avatar
            FileReferenceNotFoundError: the avatar file does not exist
            UserServiceError: the owner or a member could not be resolved
            DatabaseError: a write failed
        """
        owner_role = await self._role_repository.get_by_name(SystemRole.OWNER.value)
        main_role = await self._role_repository.get_by_name(SystemRole.MAIN.value)
        if owner_role is None or main_role is None:
            raise InvalidCredentialsError("system roles 'owner' and 'main' must exist")

        if command.avatar_file_id is not None:
            await resolve_file(self._file_gateway, command.avatar_file_id)

        chat = Chat.create(
            name=command.name,
            member_count=len(command.member_ids),
            description=command.description,
            avatar_file_id=command.avatar_file_id,
        )

        owner = await self._user_gateway.get_user(command.owner_id)

        recipients: list[str] = []
        try:
            await self._chat_repository.add(chat)
            await self._member_repository.add(
                ChatMember(chat_id=chat.id, user_id=command.owner_id, role_id=owner_role.id)
            )
            for member_id in self._invited_members(command):
                member = await self._user_gateway.get_user(member_id)
                await self._member_repository.add(
                    ChatMember(chat_id=chat.id, user_id=member_id, role_id=main_role.id)
                )
                recipients.append(member.email)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(
            f"[CreateChat] Chat {chat.id.value} created by {command.owner_id.value} "
            f"with {len(recipients)} member(s)"
        )

        for email in recipients:
            await self._notification_service.send_chat_created(
                email, chat, owner.username
            )

        return chat.id

    @staticmethod
    def _invited_members(command: CreateChatCommand) -> list[UserId]:
        # The owner already holds the owner membership; repeated ids are added once
        seen = {command.owner_id}
        members = []
        for member_id in command.member_ids:
            if member_id in seen:
                continue
            seen.add(member_id)
            members.append(member_id)
        return members
