"""Gateway ports - outbound calls to the user, file and chat services."""

from chattask.domain.ports.gateways.user_gateway import UserGateway, UserInfo
from chattask.domain.ports.gateways.file_gateway import FileGateway, FileInfo
from chattask.domain.ports.gateways.chat_gateway import ChatGateway, ChatInfo

__all__ = [
    "UserGateway",
    "UserInfo",
    "FileGateway",
    "FileInfo",
    "ChatGateway",
    "ChatInfo",
]
