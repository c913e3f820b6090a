"""Domain errors raised by services and rendered by the API error handlers.

Each error carries the HTTP status it maps to and a client-safe message.
Some statuses are kept from the original public contract on purpose:
an unknown login email answers 400 and a duplicate registration answers 500.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that end a request with a JSON ``detail``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing fields"


class Unauthorized(AppError):
    """No bearer token was supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(AppError):
    """Invalid token, wrong role or bad password."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(AppError):
    """A referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UserNotFound(NotFound):
    """Login with an email nobody registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User not found"


class Conflict(AppError):
    """Registration clashes with an existing email or username."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Registration failed. Email or username might be taken."


class PersistenceError(AppError):
    """A transaction failed and was rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error"
