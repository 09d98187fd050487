"""
InvalidCredentialsError - The caller's identifiers or role references do not
satisfy a precondition (missing system role, unknown membership, unknown chat).
Maps to: HTTP 400 / 401 / 500 depending on the route
"""


class InvalidCredentialsError(Exception):
    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)
