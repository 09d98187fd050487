"""
AccessDeniedError - Raised when user lacks permission to access a resource.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotChatMemberError(AccessDeniedError):
    """The caller has no membership in the chat, so no role to evaluate."""

    def __init__(self, message: str = "user is not a member of this chat"):
        super().__init__(message)
