"""Change User Role Command."""

import logging
from dataclasses import dataclass

from chattask.application.common.interfaces import Command, CommandHandler
from chattask.domain.exceptions import DatabaseError, InvalidCredentialsError
from chattask.domain.ports.repositories import ChatMemberRepository, ChatRoleRepository
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeUserRoleCommand(Command[None]):
    chat_id: ChatId
    user_id: UserId
    role_id: int


class ChangeUserRoleHandler(CommandHandler[None]):
    def __init__(
        self,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        unit_of_work: UnitOfWork,
    ):
        self._member_repository = member_repository
        self._role_repository = role_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: ChangeUserRoleCommand) -> None:
        """
        Raises:
            InvalidCredentialsError: the membership is absent or could not be
                read, or the target role does not exist
            DatabaseError: the update failed
        """
        # Absent membership and a failed lookup are reported the same way here
        try:
            member = await self._member_repository.get(command.chat_id, command.user_id)
        except DatabaseError as e:
            raise InvalidCredentialsError(
                f"could not load membership of user {command.user_id.value}"
            ) from e
        if member is None:
            raise InvalidCredentialsError(
                f"user {command.user_id.value} is not a member of chat {command.chat_id.value}"
            )

        role = await self._role_repository.get_by_id(command.role_id)
        if role is None:
            raise InvalidCredentialsError(f"role with id {command.role_id} does not exist")

        try:
            await self._member_repository.update_role(
                command.chat_id, command.user_id, role.id
            )
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(
            f"[ChangeUserRole] user={command.user_id.value} chat={command.chat_id.value} "
            f"role={role.name}"
        )
