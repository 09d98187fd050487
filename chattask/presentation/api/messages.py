"""
Messages API Router - sending, paging and searching chat messages.

Routes live under /chats but are registered before the chats router so the
literal "messages" and "search" segments win over /chats/{chat_id}.
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import AliasChoices, BaseModel, Field

from chattask.application.commands.messages import SendMessageCommand, SendMessageHandler
from chattask.application.dto import MessageDTO, SearchMessagesDTO
from chattask.application.queries.messages import (
    GetChatMessagesHandler,
    GetChatMessagesQuery,
    SearchMessagesHandler,
    SearchMessagesQuery,
)
from chattask.config.settings import Config
from chattask.domain.exceptions import (
    ChatNotFoundError,
    DatabaseError,
    EmptyQueryError,
    FileReferenceNotFoundError,
    FileServiceError,
    InvalidCredentialsError,
    NotChatMemberError,
    UserServiceError,
)
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.user_id import UserId
from chattask.presentation.dependencies.identity import parse_chat_id
from chattask.presentation.dependencies.permissions import require_chat_permission

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequest(BaseModel):
    """Request body for posting a message."""

    content: str = Field(min_length=1)
    file_ids: list[int] = Field(
        default_factory=list,
        validation_alias=AliasChoices("file_ids", "fileIDs"),
    )


# ==================== ROUTER ====================

router = APIRouter(prefix="/chats", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.post(
    "/messages/{chat_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    chat_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    sender_id: UserId = Depends(require_chat_permission(ChatPermissionName.SEND_MESSAGE)),
):
    """Post a message to a chat, with optional attached files."""
    command = SendMessageCommand(
        sender_id=sender_id,
        chat_id=parse_chat_id(chat_id),
        content=request.content,
        file_ids=tuple(request.file_ids),
    )
    try:
        result = await handler.execute(command)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid credentials") from e
    except UserServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileReferenceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return MessageDTO.from_entity(result.message, result.files)


@router.get("/messages/{chat_id}", response_model=list[MessageDTO])
@inject
async def get_chat_messages(
    chat_id: str,
    handler: FromDishka[GetChatMessagesHandler],
    offset: int = Query(0, ge=0),
    limit: int = Query(Config.MESSAGES_DEFAULT_LIMIT, ge=1),
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.VIEW_MESSAGES)),
):
    """A page of chat messages, newest first, with their files."""
    query = GetChatMessagesQuery(chat_id=parse_chat_id(chat_id), offset=offset, limit=limit)
    try:
        items = await handler.execute(query)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return [MessageDTO.from_entity(item.message, item.files) for item in items]


@router.get("/search/{chat_id}", response_model=SearchMessagesDTO)
@inject
async def search_messages(
    chat_id: str,
    handler: FromDishka[SearchMessagesHandler],
    query: str = Query(""),
    limit: int = Query(20, ge=1),
    offset: int = Query(0, ge=0),
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.VIEW_MESSAGES)),
):
    """Case-insensitive substring search over a chat's messages."""
    search = SearchMessagesQuery(
        user_id=caller_id,
        chat_id=parse_chat_id(chat_id),
        text=query,
        limit=min(limit, Config.SEARCH_MAX_LIMIT),
        offset=offset,
    )
    try:
        result = await handler.execute(search)
    except EmptyQueryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ChatNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except NotChatMemberError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    logger.debug(f"[Messages] Search in {chat_id} matched {result.total} messages")
    return SearchMessagesDTO(
        messages=[MessageDTO.from_entity(m) for m in result.messages],
        total=result.total,
    )
