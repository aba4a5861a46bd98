"""
Diary API errors.

Validation errors map to HTTP 400 with their short static message.
Storage errors map to HTTP 500; their message and cause stay in the server log.
"""


class DiaryAPIError(Exception):
    """Base exception for the Diary API"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(DiaryAPIError):
    """Malformed request input (400)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InvalidDateRangeError(ValidationError):
    """End date precedes start date (400)"""

    def __init__(self, message: str = "End date must not be before start date."):
        super().__init__(message)


class StorageError(DiaryAPIError):
    """Document store unreachable or returned a malformed document (500)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)
