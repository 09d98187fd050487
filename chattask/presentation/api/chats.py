"""
Chats API Router - chat lifecycle, membership and roles inside a chat.

Mutating routes are guarded by require_chat_permission(); the guard runs
before the handler, so unauthorized calls never reach orchestration.

Status mapping follows each route's contract, e.g. for create/update:
  InvalidCredentialsError -> 400, FileReferenceNotFoundError -> 404,
  FileServiceError / UserServiceError -> 502, DatabaseError -> 500
"""

from logging import getLogger
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, ConfigDict, Field

from chattask.application.commands.chats import (
    BanUserCommand,
    BanUserHandler,
    ChangeUserRoleCommand,
    ChangeUserRoleHandler,
    CreateChatCommand,
    CreateChatHandler,
    DeleteChatCommand,
    DeleteChatHandler,
    UpdateChatCommand,
    UpdateChatHandler,
)
from chattask.application.dto import (
    ChatDTO,
    ChatMemberDTO,
    FileDTO,
    RoleWithPermissionsDTO,
    UpdateChatResponseDTO,
    UpdateUserDTO,
    UserRoleDTO,
)
from chattask.application.queries.chats import (
    GetChatHandler,
    GetChatQuery,
    GetMyRoleHandler,
    GetMyRoleQuery,
    GetUserRoleHandler,
    GetUserRoleQuery,
    ListChatMembersHandler,
    ListChatMembersQuery,
    ListUserChatsHandler,
    ListUserChatsQuery,
)
from chattask.domain.exceptions import (
    ChatNotFoundError,
    DatabaseError,
    FileReferenceNotFoundError,
    FileServiceError,
    InternalServiceError,
    InvalidCredentialsError,
    NotChatMemberError,
    UserNotInChatError,
    UserServiceError,
)
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.user_id import UserId
from chattask.presentation.dependencies.identity import (
    get_caller_id,
    parse_chat_id,
    parse_user_id,
)
from chattask.presentation.dependencies.permissions import require_chat_permission

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateChatRequest(BaseModel):
    """Request body for creating a chat."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: Optional[str] = None
    avatar_file_id: Optional[int] = Field(default=None, alias="avatarFileID")
    owner_id: UUID = Field(alias="ownerID")
    user_ids: list[UUID] = Field(default_factory=list, alias="userIDs")


class CreateChatResponse(BaseModel):
    chat_id: str


class UpdateChatRequest(BaseModel):
    """Request body for updating a chat; absent fields stay unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    avatar_file_id: Optional[int] = Field(default=None, alias="avatarFileID")
    add_user_ids: list[UUID] = Field(default_factory=list, alias="addUserIDs")
    remove_user_ids: list[UUID] = Field(default_factory=list, alias="removeUserIDs")


class ChangeUserRoleRequest(BaseModel):
    user_id: UUID
    role_id: int


class SuccessResponse(BaseModel):
    success: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/chats", tags=["chats"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=CreateChatResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_chat(
    request: CreateChatRequest,
    handler: FromDishka[CreateChatHandler],
):
    """Create a chat with its owner and members."""
    command = CreateChatCommand(
        name=request.name,
        owner_id=UserId(str(request.owner_id)),
        member_ids=tuple(UserId(str(user_id)) for user_id in request.user_ids),
        description=request.description,
        avatar_file_id=request.avatar_file_id,
    )
    try:
        chat_id = await handler.execute(command)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid credentials") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileReferenceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (FileServiceError, UserServiceError) as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return CreateChatResponse(chat_id=chat_id.value)


@router.get("/user/{user_id}", response_model=list[ChatDTO])
@inject
async def list_user_chats(
    user_id: str,
    handler: FromDishka[ListUserChatsHandler],
):
    """Chats the user is a member of."""
    try:
        chats = await handler.execute(ListUserChatsQuery(user_id=parse_user_id(user_id)))
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [ChatDTO.from_entity(chat) for chat in chats]


@router.get("/{chat_id}", response_model=ChatDTO)
@inject
async def get_chat(
    chat_id: str,
    handler: FromDishka[GetChatHandler],
):
    """Chat details, with the avatar file when the file service has it."""
    try:
        result = await handler.execute(GetChatQuery(chat_id=parse_chat_id(chat_id)))
    except ChatNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    avatar = FileDTO.from_info(result.avatar) if result.avatar else None
    return ChatDTO.from_entity(result.chat, avatar=avatar)


@router.put("/{chat_id}", response_model=UpdateChatResponseDTO)
@inject
async def update_chat(
    chat_id: str,
    request: UpdateChatRequest,
    handler: FromDishka[UpdateChatHandler],
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.EDIT_CHAT)),
):
    """Update chat fields and add/remove members."""
    command = UpdateChatCommand(
        chat_id=parse_chat_id(chat_id),
        name=request.name,
        description=request.description,
        avatar_file_id=request.avatar_file_id,
        add_user_ids=tuple(UserId(str(u)) for u in request.add_user_ids),
        remove_user_ids=tuple(UserId(str(u)) for u in request.remove_user_ids),
    )
    try:
        result = await handler.execute(command)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid credentials") from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except FileReferenceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (FileServiceError, UserServiceError) as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    logger.info(f"[Chats] Chat {chat_id} updated by {caller_id.value}")
    return UpdateChatResponseDTO(
        chat=ChatDTO.from_entity(result.chat),
        update_users=[
            UpdateUserDTO(user_id=u.user_id.value, state=u.state) for u in result.update_users
        ],
    )


@router.delete(
    "/{chat_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def delete_chat(
    chat_id: str,
    handler: FromDishka[DeleteChatHandler],
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.DELETE_CHAT)),
):
    """Delete a chat with its memberships and messages."""
    try:
        await handler.execute(DeleteChatCommand(chat_id=parse_chat_id(chat_id)))
    except ChatNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    logger.info(f"[Chats] Chat {chat_id} deleted by {caller_id.value}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{chat_id}/roles/change", response_model=SuccessResponse)
@inject
async def change_user_role(
    chat_id: str,
    request: ChangeUserRoleRequest,
    handler: FromDishka[ChangeUserRoleHandler],
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.CHANGE_ROLE)),
):
    """Assign another role to a member."""
    command = ChangeUserRoleCommand(
        chat_id=parse_chat_id(chat_id),
        user_id=UserId(str(request.user_id)),
        role_id=request.role_id,
    )
    try:
        await handler.execute(command)
    except (InvalidCredentialsError, DatabaseError) as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return SuccessResponse(success=True)


@router.post("/{chat_id}/ban/{user_id}", response_model=SuccessResponse)
@inject
async def ban_user(
    chat_id: str,
    user_id: str,
    handler: FromDishka[BanUserHandler],
    caller_id: UserId = Depends(require_chat_permission(ChatPermissionName.BAN_USER)),
):
    """Move a member to the banned role."""
    command = BanUserCommand(chat_id=parse_chat_id(chat_id), user_id=parse_user_id(user_id))
    try:
        await handler.execute(command)
    except (InvalidCredentialsError, InternalServiceError, DatabaseError) as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    logger.info(f"[Chats] User {user_id} banned in chat {chat_id} by {caller_id.value}")
    return SuccessResponse(success=True)


@router.get("/{chat_id}/user-roles/{user_id}", response_model=UserRoleDTO)
@inject
async def get_user_role(
    chat_id: str,
    user_id: str,
    handler: FromDishka[GetUserRoleHandler],
    requester_id: UserId = Depends(get_caller_id),
):
    """Role name of a member, visible to other members only."""
    query = GetUserRoleQuery(
        chat_id=parse_chat_id(chat_id),
        user_id=parse_user_id(user_id),
        requester_id=requester_id,
    )
    try:
        role = await handler.execute(query)
    except NotChatMemberError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except UserNotInChatError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return UserRoleDTO(role_name=role.name)


@router.get("/{chat_id}/me/role", response_model=RoleWithPermissionsDTO)
@inject
async def get_my_role(
    chat_id: str,
    handler: FromDishka[GetMyRoleHandler],
    caller_id: UserId = Depends(get_caller_id),
):
    """The caller's own role with its permissions."""
    try:
        role = await handler.execute(GetMyRoleQuery(chat_id=parse_chat_id(chat_id), user_id=caller_id))
    except UserNotInChatError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e

    return RoleWithPermissionsDTO.from_entity(role)


@router.get("/{chat_id}/members", response_model=list[ChatMemberDTO])
@inject
async def list_chat_members(
    chat_id: str,
    handler: FromDishka[ListChatMembersHandler],
):
    try:
        members = await handler.execute(ListChatMembersQuery(chat_id=parse_chat_id(chat_id)))
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [ChatMemberDTO.from_entity(member) for member in members]
