"""
User service gateway.

GET {USER_SERVICE_URL}/api/v1/users/{id} answers {"user": {...}}; the user
object may use Go-style (ID, Username, Email) or lowercase keys.
"""

import httpx

from chattask.config.settings import Config
from chattask.domain.exceptions import UserServiceError
from chattask.domain.ports.gateways.user_gateway import UserGateway, UserInfo
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.http_clients.base_client import (
    GatewayCallError,
    get_json,
    pick,
)


class HttpUserGateway(UserGateway):
    def __init__(self, client: httpx.AsyncClient, base_url: str = Config.USER_SERVICE_URL):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def get_user(self, user_id: UserId) -> UserInfo:
        url = f"{self._base_url}/api/v1/users/{user_id.value}"
        try:
            data = await get_json(self._client, url, "user")
        except GatewayCallError as e:
            raise UserServiceError(user_id.value, str(e)) from e

        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise UserServiceError(user_id.value, "nil user")

        return UserInfo(
            id=str(pick(user, "ID", "id", default=user_id.value)),
            username=pick(user, "Username", "username", default=""),
            email=pick(user, "Email", "email", default=""),
        )
