"""
Chat permission guard for FastAPI routes.

Usage:
    @router.put("/{chat_id}")
    @inject
    async def update_chat(
        chat_id: str,
        ...,
        caller: UserId = Depends(require_chat_permission(ChatPermissionName.EDIT_CHAT)),
    ): ...

Flow:
1. X-User-ID header and chat_id path parameter must be UUIDs (400 otherwise)
2. ChatPermissionService.has_permission() is resolved from the request container
3. Missing membership or a failed lookup -> 403 "Could not verify permission"
4. Permission not granted -> 403 "Forbidden: insufficient permissions"
5. Granted -> the caller's UserId is handed to the route
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from chattask.domain.exceptions import DatabaseError, NotChatMemberError
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.user_id import UserId
from chattask.presentation.dependencies.identity import get_caller_id, parse_chat_id
from chattask.services.chat_permission_service import ChatPermissionService

logger = logging.getLogger(__name__)


def require_chat_permission(permission: ChatPermissionName):
    async def check_chat_permission(
        request: Request,
        chat_id: str,
        caller_id: UserId = Depends(get_caller_id),
    ) -> UserId:
        parsed_chat_id = parse_chat_id(chat_id)

        container = request.state.dishka_container
        permission_service = await container.get(ChatPermissionService)

        try:
            allowed = await permission_service.has_permission(
                caller_id, parsed_chat_id, permission.value
            )
        except (NotChatMemberError, DatabaseError) as e:
            logger.warning(
                f"[Permissions] Could not verify {permission.value} for "
                f"user={caller_id.value} chat={chat_id}: {e}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Could not verify permission",
            ) from e

        if not allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden: insufficient permissions",
            )
        return caller_id

    return check_chat_permission
