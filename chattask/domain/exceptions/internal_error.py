"""
InternalServiceError - Required reference data is missing at call time.
Maps to: HTTP 500 Internal Server Error
"""


class InternalServiceError(Exception):
    def __init__(self, message: str = "internal server error"):
        super().__init__(message)
