"""
Caller identity dependency.

Authentication happens upstream; the gateway forwards the validated user id
in the X-User-ID header. This only checks that it is a well-formed UUID.
"""

from typing import Optional

from fastapi import Header, HTTPException, status

from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.user_id import UserId


async def get_caller_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-ID"),
) -> UserId:
    """
    Raises:
        HTTPException 400 if the header is missing or not a UUID
    """
    try:
        return UserId(x_user_id or "")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid User ID") from e


def parse_chat_id(chat_id: str) -> ChatId:
    try:
        return ChatId(chat_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Chat ID") from e


def parse_user_id(user_id: str) -> UserId:
    try:
        return UserId(user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid User ID") from e
