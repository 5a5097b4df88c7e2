from fastapi import status


class FileHostError(Exception):
    """Base exception for all caller-visible failures"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(FileHostError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class Conflict(FileHostError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User already exists"


class NotFound(FileHostError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "File not found"


class BadRequest(FileHostError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Internal(FileHostError):
    pass
