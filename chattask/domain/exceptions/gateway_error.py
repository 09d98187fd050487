"""
GatewayError - An outbound call to the user, file or chat service failed.
Maps to: HTTP 502 Bad Gateway (400 for user lookups on SendMessage)

Each error carries the id that was being resolved and the downstream message.
"""


class GatewayError(Exception):
    service = "external service"

    def __init__(self, entity_id: object, detail: str):
        self.entity_id = entity_id
        self.detail = detail
        super().__init__(f"{self.service} error for id {entity_id}: {detail}")


class UserServiceError(GatewayError):
    service = "user service"


class FileServiceError(GatewayError):
    service = "file service"


class ChatServiceError(GatewayError):
    service = "chat service"
