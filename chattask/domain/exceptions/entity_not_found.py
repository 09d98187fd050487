"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found (SendMessage and task status updates map some
subclasses to 400)
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class ChatNotFoundError(EntityNotFoundError):
    def __init__(self, chat_id: object = None):
        self.chat_id = chat_id
        super().__init__("chat not found" if chat_id is None else f"chat {chat_id} not found")


class UserNotInChatError(EntityNotFoundError):
    def __init__(self, message: str = "user is not a member of this chat"):
        super().__init__(message)


class FileReferenceNotFoundError(EntityNotFoundError):
    """The file service answered, but the referenced file does not exist."""

    def __init__(self, file_id: int):
        self.file_id = file_id
        super().__init__(f"file with id {file_id} not found")


class TaskNotFoundError(EntityNotFoundError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"task with id {task_id} not found")


class TaskStatusNotFoundError(EntityNotFoundError):
    def __init__(self, status: object):
        self.status = status
        super().__init__(f"task status {status!r} not found")


class ChatRoleNotFoundError(EntityNotFoundError):
    def __init__(self, role_id: int):
        self.role_id = role_id
        super().__init__(f"role with id {role_id} not found")


class ChatPermissionNotFoundError(EntityNotFoundError):
    def __init__(self, permission_id: int):
        self.permission_id = permission_id
        super().__init__(f"permission with id {permission_id} not found")
