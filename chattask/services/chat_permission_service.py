"""
Chat Permission Service - Decides whether a member may use a capability.

The membership, its role and the role's permission set are re-read on every
call; there is no cache, so a role change or a ban takes effect on the next
request.
"""

import logging

from chattask.domain.exceptions import NotChatMemberError
from chattask.domain.ports.repositories import ChatMemberRepository
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ChatPermissionService:
    def __init__(self, member_repository: ChatMemberRepository):
        self._member_repository = member_repository

    async def has_permission(
        self, user_id: UserId, chat_id: ChatId, permission_name: str
    ) -> bool:
        """
        Check whether the user's role in the chat grants the permission.

        Returns:
            True iff the permission is in the member's role permission set

        Raises:
            NotChatMemberError: the user has no membership in the chat
            DatabaseError: the membership lookup itself failed
        """
        member = await self._member_repository.get(chat_id, user_id)
        if member is None:
            raise NotChatMemberError(
                f"user {user_id.value} is not a member of chat {chat_id.value}"
            )

        allowed = member.role is not None and member.role.grants(permission_name)
        logger.debug(
            f"[Permissions] user={user_id.value} chat={chat_id.value} "
            f"permission={permission_name} allowed={allowed}"
        )
        return allowed
