"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps them to HTTP status codes per route.
"""

from chattask.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    ChatNotFoundError,
    UserNotInChatError,
    FileReferenceNotFoundError,
    TaskNotFoundError,
    TaskStatusNotFoundError,
    ChatRoleNotFoundError,
    ChatPermissionNotFoundError,
)
from chattask.domain.exceptions.access_denied import (
    AccessDeniedError,
    NotChatMemberError,
)
from chattask.domain.exceptions.validation_error import (
    DomainValidationError,
    EmptyQueryError,
)
from chattask.domain.exceptions.invalid_credentials import InvalidCredentialsError
from chattask.domain.exceptions.gateway_error import (
    GatewayError,
    UserServiceError,
    FileServiceError,
    ChatServiceError,
)
from chattask.domain.exceptions.database_error import DatabaseError
from chattask.domain.exceptions.internal_error import InternalServiceError
from chattask.domain.exceptions.conflict import (
    ConflictError,
    DuplicateNameError,
    TaskStatusAlreadyExistsError,
)

__all__ = [
    "EntityNotFoundError",
    "ChatNotFoundError",
    "UserNotInChatError",
    "FileReferenceNotFoundError",
    "TaskNotFoundError",
    "TaskStatusNotFoundError",
    "ChatRoleNotFoundError",
    "ChatPermissionNotFoundError",
    "AccessDeniedError",
    "NotChatMemberError",
    "DomainValidationError",
    "EmptyQueryError",
    "InvalidCredentialsError",
    "GatewayError",
    "UserServiceError",
    "FileServiceError",
    "ChatServiceError",
    "DatabaseError",
    "InternalServiceError",
    "ConflictError",
    "DuplicateNameError",
    "TaskStatusAlreadyExistsError",
]
