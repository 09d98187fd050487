"""Ban User Command - moves a member to the "banned" role."""

import logging
from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.exceptions import InternalServiceError, InvalidCredentialsError
from chattask.domain.ports.repositories import ChatMemberRepository, ChatRoleRepository
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.system_role import SystemRole
from chattask.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BanUserCommand(Command[None]):
    chat_id: ChatId
    user_id: UserId


class BanUserHandler(CommandHandler[None]):
    def __init__(
        self,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        unit_of_work: UnitOfWork,
    ):
        self._member_repository = member_repository
        self._role_repository = role_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: BanUserCommand) -> None:
        """
        Raises:
            InvalidCredentialsError: the user is not a member of the chat
            InternalServiceError: the "banned" role is not configured
            DatabaseError: a lookup or the update failed
        """
        member = await self._member_repository.get(command.chat_id, command.user_id)
        if member is None:
            raise InvalidCredentialsError(
                f"user {command.user_id.value} is not a member of chat {command.chat_id.value}"
            )

        banned_role = await self._role_repository.get_by_name(SystemRole.BANNED.value)
        if banned_role is None:
            raise InternalServiceError("system role 'banned' is not configured")

        try:
            await self._member_repository.update_role(
                command.chat_id, command.user_id, banned_role.id
            )
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(
            f"[BanUser] user={command.user_id.value} banned in chat {command.chat_id.value}"
        )
