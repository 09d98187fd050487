"""
Chat Roles API Router - administration of chat roles and permissions.

The three system roles (owner, main, banned) are seeded at startup; these
routes manage the catalogue around them.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, ConfigDict, Field

from chattask.application.commands.chat_roles import (
    CreateChatPermissionCommand,
    CreateChatPermissionHandler,
    CreateChatRoleCommand,
    CreateChatRoleHandler,
    DeleteChatPermissionCommand,
    DeleteChatPermissionHandler,
    DeleteChatRoleCommand,
    DeleteChatRoleHandler,
    UpdateRolePermissionsCommand,
    UpdateRolePermissionsHandler,
)
from chattask.application.dto import PermissionDTO, RoleDTO
from chattask.application.queries.chat_roles import (
    GetChatRoleHandler,
    GetChatRoleQuery,
    ListChatPermissionsHandler,
    ListChatPermissionsQuery,
    ListChatRolesHandler,
    ListChatRolesQuery,
)
from chattask.domain.exceptions import (
    ChatPermissionNotFoundError,
    ChatRoleNotFoundError,
    DatabaseError,
    DuplicateNameError,
)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateRoleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    permission_ids: list[int] = Field(default_factory=list, alias="permissionIds")


class RolePermissionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    permission_ids: list[int] = Field(alias="permissionIds")


class CreatePermissionRequest(BaseModel):
    name: str = Field(min_length=1)


# ==================== ROUTER ====================

router = APIRouter(tags=["chat-roles"])


# ==================== ROLES ====================


@router.get("/chat-roles", response_model=list[RoleDTO])
@inject
async def list_roles(handler: FromDishka[ListChatRolesHandler]):
    try:
        roles = await handler.execute(ListChatRolesQuery())
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [RoleDTO.from_entity(role) for role in roles]


@router.post("/chat-roles", response_model=RoleDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_role(
    request: CreateRoleRequest,
    handler: FromDishka[CreateChatRoleHandler],
):
    """Create a role granting the given permissions."""
    command = CreateChatRoleCommand(name=request.name, permission_ids=tuple(request.permission_ids))
    try:
        role = await handler.execute(command)
    except DuplicateNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except ChatPermissionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return RoleDTO.from_entity(role)


@router.get("/chat-roles/{role_id}", response_model=RoleDTO)
@inject
async def get_role(role_id: int, handler: FromDishka[GetChatRoleHandler]):
    try:
        role = await handler.execute(GetChatRoleQuery(role_id=role_id))
    except ChatRoleNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return RoleDTO.from_entity(role)


@router.patch("/chat-roles/{role_id}/permissions", response_model=RoleDTO)
@inject
async def update_role_permissions(
    role_id: int,
    request: RolePermissionsRequest,
    handler: FromDishka[UpdateRolePermissionsHandler],
):
    """Replace the permission set of a role."""
    command = UpdateRolePermissionsCommand(role_id=role_id, permission_ids=tuple(request.permission_ids))
    try:
        role = await handler.execute(command)
    except (ChatRoleNotFoundError, ChatPermissionNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return RoleDTO.from_entity(role)


@router.delete(
    "/chat-roles/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def delete_role(role_id: int, handler: FromDishka[DeleteChatRoleHandler]):
    try:
        await handler.execute(DeleteChatRoleCommand(role_id=role_id))
    except ChatRoleNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== PERMISSIONS ====================


@router.get("/chat-permissions", response_model=list[PermissionDTO])
@inject
async def list_permissions(handler: FromDishka[ListChatPermissionsHandler]):
    try:
        permissions = await handler.execute(ListChatPermissionsQuery())
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return [PermissionDTO(id=p.id, name=p.name) for p in permissions]


@router.post(
    "/chat-permissions",
    response_model=PermissionDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_permission(
    request: CreatePermissionRequest,
    handler: FromDishka[CreateChatPermissionHandler],
):
    try:
        permission = await handler.execute(CreateChatPermissionCommand(name=request.name))
    except DuplicateNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return PermissionDTO(id=permission.id, name=permission.name)


@router.delete(
    "/chat-permissions/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@inject
async def delete_permission(permission_id: int, handler: FromDishka[DeleteChatPermissionHandler]):
    """Delete a permission; roles granting it lose it."""
    try:
        await handler.execute(DeleteChatPermissionCommand(permission_id=permission_id))
    except ChatPermissionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
