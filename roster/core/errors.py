"""Domain errors raised by the repositories and services.

Each error carries the HTTP status it maps to and a client-safe message.
Translation to the ``{"error": ...}`` envelope happens in
``roster.exception_handlers``.
"""

from fastapi import status


class RosterError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RosterError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateEmail(RosterError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class InvalidCredentials(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class NoToken(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied. No token provided."


class InvalidToken(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class NotFound(RosterError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageFault(RosterError):
    """Store failure that is not otherwise classified.

    The message is always the generic one; the underlying exception is chained
    and logged, never sent to clients.
    """

    def __init__(self) -> None:
        super().__init__(self.default_message)
