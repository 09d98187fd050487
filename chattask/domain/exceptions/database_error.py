"""
DatabaseError - A storage operation failed.
Maps to: HTTP 500 Internal Server Error
"""


class DatabaseError(Exception):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"database error: {detail}")
