"""
ConflictError - A uniquely named record already exists.
Maps to: HTTP 409 Conflict (400 for task statuses)
"""


class ConflictError(Exception):
    def __init__(self, message: str = "resource already exists"):
        super().__init__(message)


class DuplicateNameError(ConflictError):
    def __init__(self, kind: str, name: str):
        self.name = name
        super().__init__(f"{kind} {name!r} already exists")


class TaskStatusAlreadyExistsError(ConflictError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"task status {name!r} already exists")
