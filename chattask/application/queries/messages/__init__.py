"""Message queries."""

from .get_chat_messages import (
    GetChatMessagesQuery,
    GetChatMessagesHandler,
    MessageWithFiles,
)
from .search_messages import (
    SearchMessagesQuery,
    SearchMessagesHandler,
    SearchMessagesResult,
)

__all__ = [
    "GetChatMessagesQuery",
    "GetChatMessagesHandler",
    "MessageWithFiles",
    "SearchMessagesQuery",
    "SearchMessagesHandler",
    "SearchMessagesResult",
]
