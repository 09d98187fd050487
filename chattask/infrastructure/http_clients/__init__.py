"""
HTTP gateways to the user, file and chat services.

All gateways share one app-scoped httpx.AsyncClient with an explicit timeout.
"""

from chattask.infrastructure.http_clients.base_client import (
    create_http_client,
    close_http_client,
)
from chattask.infrastructure.http_clients.user_client import HttpUserGateway
from chattask.infrastructure.http_clients.file_client import HttpFileGateway
from chattask.infrastructure.http_clients.chat_client import HttpChatGateway

__all__ = [
    "create_http_client",
    "close_http_client",
    "HttpUserGateway",
    "HttpFileGateway",
    "HttpChatGateway",
]
