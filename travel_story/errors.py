"""
API error types.

Every error a route raises on purpose is an ``APIError``; the application
renders it as the standard ``{"error": true, "message": ...}`` envelope with
the error's status code.
"""

from fastapi import status


class APIError(Exception):
    """Base class for errors rendered as a JSON envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, headers: dict[str, str] | None = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class ConflictError(APIError):
    # Reported as 400, not 409: clients already rely on it
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class UnauthorizedError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalServerError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict:
    return {"error": True, "message": message}
